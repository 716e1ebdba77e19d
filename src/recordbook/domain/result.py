"""Result value returned by application handlers.

Repositories fail fast by raising; handlers catch the domain exceptions
at their boundary and hand back a ``Result`` the caller inspects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from recordbook.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value of a successful result."""
        if self.error is not None:
            raise ValueError(f"Cannot unwrap failed result ({self.error.value}): {self.message}")
        return self.value  # type: ignore[return-value]

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(value: T | None = None, message: str = "") -> Result[T]:
        return Result(value=value, message=message)

    @staticmethod
    def failure(kind: ErrorKind, message: str) -> Result[T]:
        return Result(error=kind, message=message)

    @staticmethod
    def from_exception(exc: DomainException) -> Result[T]:
        return Result(error=exc.kind, message=str(exc))
