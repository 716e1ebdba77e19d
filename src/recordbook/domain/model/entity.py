"""The capability every stored record shares: a unique integer ID."""

from __future__ import annotations

from typing import Protocol


class Identifiable(Protocol):

    @property
    def id(self) -> int: ...
