"""Abstract whole-collection snapshot storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class SnapshotStore(ABC, Generic[T]):

    @abstractmethod
    def exists(self) -> bool:
        """Return True if a snapshot has been written."""

    @abstractmethod
    def save(self, entities: Iterable[T]) -> int:
        """Replace the snapshot with *entities*; returns how many were written."""

    @abstractmethod
    def load(self) -> list[T]:
        """Return every entity in the snapshot, or [] if there is none."""
