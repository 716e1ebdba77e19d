"""An immutable entry in the inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InventoryRecord:

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Qty: {self.quantity}, "
            f"Added: {self.date_added:%Y-%m-%d %H:%M:%S}"
        )
