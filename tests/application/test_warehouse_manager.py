"""Integration tests for warehouse stock operations."""

from datetime import date, timedelta

from recordbook.application.warehouse import WarehouseManager
from recordbook.domain.exceptions import ErrorKind
from recordbook.domain.model.stock import GroceryItem
from recordbook.infrastructure import seed
from recordbook.infrastructure.persistence.in_memory import StockRepository

TODAY = date(2025, 1, 1)


def _manager():
    return WarehouseManager(
        electronics=StockRepository(seed.electronic_items()),
        groceries=StockRepository(seed.grocery_items(TODAY)),
    )


class TestSeededStock:

    def test_grocery_expiry_is_relative_to_today(self):
        manager = _manager()
        apples, milk = manager.list_items(manager.groceries)
        assert apples.expiry_date == TODAY + timedelta(days=10)
        assert milk.expiry_date == TODAY + timedelta(days=5)


class TestIncreaseStock:

    def test_reports_new_quantity(self):
        manager = _manager()
        result = manager.increase_stock(manager.electronics, 1, 5)
        assert result.ok
        assert result.value == 15
        assert result.message == "Stock increased for item ID 1. New Quantity: 15"
        assert manager.electronics.get_by_id(1).quantity == 15

    def test_unknown_item(self):
        manager = _manager()
        result = manager.increase_stock(manager.groceries, 7, 5)
        assert result.error == ErrorKind.ENTITY_NOT_FOUND
        assert result.message == "Item with ID 7 not found."

    def test_result_below_zero_rejected(self):
        manager = _manager()
        result = manager.increase_stock(manager.groceries, 2, -31)
        assert result.error == ErrorKind.INVALID_VALUE
        assert manager.groceries.get_by_id(2).quantity == 30


class TestErrorPathsContinue:

    def test_demo_sequence(self):
        manager = _manager()

        duplicate = manager.add_item(
            manager.groceries, GroceryItem(1, "Bananas", 20, TODAY + timedelta(days=7))
        )
        missing = manager.remove_item(manager.electronics, 99)
        negative = manager.update_quantity(manager.groceries, 2, -5)

        assert duplicate.error == ErrorKind.DUPLICATE_ENTITY
        assert duplicate.message == "Item with ID 1 already exists."
        assert missing.error == ErrorKind.ENTITY_NOT_FOUND
        assert missing.message == "Item with ID 99 not found for removal."
        assert negative.error == ErrorKind.INVALID_VALUE
        assert negative.message == "Quantity cannot be negative."

        # Nothing changed
        assert [i.name for i in manager.list_items(manager.groceries)] == ["Apples", "Milk"]
        assert len(manager.list_items(manager.electronics)) == 2
        assert manager.groceries.get_by_id(2).quantity == 30

    def test_successful_operations(self):
        manager = _manager()
        added = manager.add_item(manager.groceries, GroceryItem(3, "Bread", 12, TODAY))
        removed = manager.remove_item(manager.electronics, 2)
        updated = manager.update_quantity(manager.groceries, 3, 4)

        assert added.ok
        assert removed.message == "Item with ID 2 removed successfully."
        assert updated.value == 4
        assert [i.id for i in manager.list_items(manager.electronics)] == [1]
