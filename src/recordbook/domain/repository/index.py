"""Derived grouping index over a repository's contents.

The index is a projection, never a source of truth: ``rebuild`` discards
the previous mapping and repopulates it from scratch, so rebuilding from
unchanged contents always yields the same mapping.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class GroupIndex(Generic[K, T]):

    def __init__(self, key: Callable[[T], K]) -> None:
        self._key = key
        self._groups: dict[K, list[T]] = {}

    def rebuild(self, entities: Iterable[T]) -> None:
        self._groups.clear()
        for entity in entities:
            self._groups.setdefault(self._key(entity), []).append(entity)

    def get(self, key: K) -> list[T]:
        """Return a copy of the group for *key*; empty when there is none."""
        return list(self._groups.get(key, ()))

    def as_dict(self) -> dict[K, tuple[T, ...]]:
        return {key: tuple(group) for key, group in self._groups.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)
