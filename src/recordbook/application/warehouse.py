"""Application service: warehouse stock management.

Every operation is validated independently and reports its outcome as a
``Result`` so one failed operation never stops the ones that follow.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from recordbook.domain.exceptions import DomainException
from recordbook.domain.model.stock import ElectronicItem, GroceryItem, StockItem
from recordbook.domain.result import Result
from recordbook.domain.repository.repository import QuantityRepository

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=StockItem)


class WarehouseManager:

    def __init__(
        self,
        electronics: QuantityRepository[ElectronicItem],
        groceries: QuantityRepository[GroceryItem],
    ) -> None:
        self.electronics = electronics
        self.groceries = groceries

    @staticmethod
    def list_items(repo: QuantityRepository[S]) -> list[S]:
        return repo.list_all()

    @staticmethod
    def add_item(repo: QuantityRepository[S], item: S) -> Result[S]:
        try:
            repo.add(item)
        except DomainException as exc:
            logger.warning("Add rejected: %s", exc)
            return Result.from_exception(exc)
        return Result.success(item, f"Item with ID {item.id} added successfully.")

    @staticmethod
    def increase_stock(repo: QuantityRepository[S], item_id: int, amount: int) -> Result[int]:
        """Add *amount* units to an item; returns the new quantity."""
        try:
            item = repo.get_by_id(item_id)
            new_quantity = repo.update_quantity(item_id, item.quantity + amount)
        except DomainException as exc:
            logger.warning("Stock increase rejected: %s", exc)
            return Result.from_exception(exc)
        logger.info("Item %d restocked to %d", item_id, new_quantity)
        return Result.success(
            new_quantity,
            f"Stock increased for item ID {item_id}. New Quantity: {new_quantity}",
        )

    @staticmethod
    def update_quantity(repo: QuantityRepository[S], item_id: int, quantity: int) -> Result[int]:
        try:
            new_quantity = repo.update_quantity(item_id, quantity)
        except DomainException as exc:
            logger.warning("Quantity update rejected: %s", exc)
            return Result.from_exception(exc)
        return Result.success(
            new_quantity, f"Quantity for item ID {item_id} set to {new_quantity}"
        )

    @staticmethod
    def remove_item(repo: QuantityRepository[S], item_id: int) -> Result[None]:
        try:
            repo.remove(item_id)
        except DomainException as exc:
            logger.warning("Removal rejected: %s", exc)
            return Result.from_exception(exc)
        return Result.success(None, f"Item with ID {item_id} removed successfully.")
