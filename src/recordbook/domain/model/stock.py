"""Warehouse stock items.

Unlike the other records these are mutable: ``quantity`` is the one field
the warehouse is allowed to change after an item is stocked, and only
through ``StockRepository.update_quantity``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class StockItem(Protocol):

    id: int
    name: str
    quantity: int


@dataclass
class ElectronicItem:

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Warranty: {self.warranty_months} months, Qty: {self.quantity}"
        )


@dataclass
class GroceryItem:

    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, Name: {self.name}, "
            f"Expiry: {self.expiry_date:%Y-%m-%d}, Qty: {self.quantity}"
        )
