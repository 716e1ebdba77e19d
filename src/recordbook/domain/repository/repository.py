"""Abstract generic repository.

Defined in the domain layer so handlers depend only on this contract.
Concrete implementations (list-backed, dict-backed) live in the
infrastructure layer.

Two families satisfy the contract:

- lookup-style repositories report absence by returning ``None`` or
  ``False`` and accept repeated IDs;
- keyed repositories enforce unique IDs and raise
  ``DuplicateEntityError`` / ``EntityNotFoundError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar

from recordbook.domain.model.entity import Identifiable

T = TypeVar("T", bound=Identifiable)


class Repository(ABC, Generic[T]):

    @abstractmethod
    def add(self, entity: T) -> None:
        """Store a new entity."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Return the entity with *entity_id*."""

    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first entity matching *predicate*, or None."""

    @abstractmethod
    def remove(self, entity_id: int) -> bool:
        """Remove the entity with *entity_id*."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return a copy of every entity, in insertion order."""

    @abstractmethod
    def replace_all(self, entities: Iterable[T]) -> None:
        """Swap the whole collection for *entities*."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __contains__(self, entity_id: object) -> bool:
        return any(entity.id == entity_id for entity in self.list_all())


class QuantityRepository(Repository[T]):
    """A keyed repository whose entities expose a mutable ``quantity``."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T:
        """Return the stored entity; raises EntityNotFoundError if absent."""

    @abstractmethod
    def update_quantity(self, entity_id: int, new_quantity: int) -> int:
        """Validate and apply a new quantity; returns the stored value."""
