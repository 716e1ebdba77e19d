"""In-memory implementations of the generic Repository contract.

``ListRepository`` keeps a plain list and reports absence with None/False.
``KeyedRepository`` keeps an insertion-ordered dict and raises on
duplicate or missing IDs.  ``StockRepository`` adds the one permitted
mutation on warehouse items: changing their quantity.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from recordbook.domain.exceptions import (
    DuplicateEntityError,
    DuplicateItemError,
    EntityNotFoundError,
    InvalidQuantityError,
    ItemNotFoundError,
    ValidationError,
)
from recordbook.domain.model.entity import Identifiable
from recordbook.domain.model.stock import StockItem
from recordbook.domain.repository.repository import QuantityRepository, Repository

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Identifiable)
S = TypeVar("S", bound=StockItem)


class ListRepository(Repository[T]):

    def __init__(self, entities: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        for entity in entities or []:
            self.add(entity)

    # --- Repository interface -------------------------------------------------

    def add(self, entity: T) -> None:
        if entity is None:
            raise ValidationError("Cannot add None to a repository")
        self._items.append(entity)
        logger.debug("Added %r", entity)

    def get_by_id(self, entity_id: int) -> T | None:
        return self.find(lambda entity: entity.id == entity_id)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        for entity in self._items:
            if predicate(entity):
                return entity
        return None

    def remove(self, entity_id: int) -> bool:
        return self.remove_where(lambda entity: entity.id == entity_id)

    def remove_where(self, predicate: Callable[[T], bool]) -> bool:
        """Remove the first entity matching *predicate*; False if none did."""
        for i, entity in enumerate(self._items):
            if predicate(entity):
                del self._items[i]
                logger.debug("Removed %r", entity)
                return True
        return False

    def list_all(self) -> list[T]:
        return list(self._items)

    def replace_all(self, entities: Iterable[T]) -> None:
        replacement = list(entities)
        if any(entity is None for entity in replacement):
            raise ValidationError("Cannot add None to a repository")
        self._items = replacement

    def __len__(self) -> int:
        return len(self._items)


class KeyedRepository(Repository[T]):

    duplicate_error: type[DuplicateEntityError] = DuplicateEntityError
    not_found_error: type[EntityNotFoundError] = EntityNotFoundError

    def __init__(
        self,
        entities: Iterable[T] | None = None,
        entity_name: str = "Entity",
    ) -> None:
        self._entity_name = entity_name
        self._store: dict[int, T] = {}
        for entity in entities or []:
            self.add(entity)

    # --- Repository interface -------------------------------------------------

    def add(self, entity: T) -> None:
        if entity is None:
            raise ValidationError("Cannot add None to a repository")
        if entity.id in self._store:
            raise self.duplicate_error(
                f"{self._entity_name} with ID {entity.id} already exists."
            )
        self._store[entity.id] = entity
        logger.debug("Added %s %d", self._entity_name, entity.id)

    def get_by_id(self, entity_id: int) -> T:
        """Return the stored entity itself, not a copy."""
        try:
            return self._store[entity_id]
        except KeyError:
            raise self.not_found_error(
                f"{self._entity_name} with ID {entity_id} not found."
            ) from None

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        for entity in self._store.values():
            if predicate(entity):
                return entity
        return None

    def remove(self, entity_id: int) -> bool:
        if self._store.pop(entity_id, None) is None:
            raise self.not_found_error(
                f"{self._entity_name} with ID {entity_id} not found for removal."
            )
        logger.debug("Removed %s %d", self._entity_name, entity_id)
        return True

    def list_all(self) -> list[T]:
        return list(self._store.values())

    def replace_all(self, entities: Iterable[T]) -> None:
        replacement: dict[int, T] = {}
        for entity in entities:
            if entity.id in replacement:
                raise self.duplicate_error(
                    f"{self._entity_name} with ID {entity.id} already exists."
                )
            replacement[entity.id] = entity
        self._store = replacement

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._store


class StockRepository(KeyedRepository[S], QuantityRepository[S]):

    duplicate_error = DuplicateItemError
    not_found_error = ItemNotFoundError

    def __init__(self, items: Iterable[S] | None = None) -> None:
        super().__init__(items, entity_name="Item")

    def update_quantity(self, item_id: int, new_quantity: int) -> int:
        """Set the stock level of an item and return it.

        The value is validated before the lookup, so a negative quantity
        is rejected even for an unknown ID.
        """
        if new_quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative.")
        item = self._store.get(item_id)
        if item is None:
            raise self.not_found_error(
                f"{self._entity_name} with ID {item_id} not found for update."
            )
        item.quantity = new_quantity
        logger.debug("Item %d quantity set to %d", item_id, new_quantity)
        return new_quantity
