"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
application layer can fold them into a ``Result`` and the CLI can display
user-friendly messages.  Every class carries the ``ErrorKind`` it maps to.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    INVALID_VALUE = "INVALID_VALUE"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_SCORE_FORMAT = "INVALID_SCORE_FORMAT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    IO_FAILURE = "IO_FAILURE"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.INVALID_VALUE


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidValueError(ValidationError):
    """An update supplied a semantically invalid value."""


class InvalidQuantityError(InvalidValueError):
    pass


class DuplicateEntityError(DomainException):
    """An entity with the same ID already exists."""

    kind = ErrorKind.DUPLICATE_ENTITY


class DuplicateItemError(DuplicateEntityError):
    pass


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.ENTITY_NOT_FOUND


class ItemNotFoundError(EntityNotFoundError):
    pass


class MissingFieldError(DomainException):
    """An input line lacks a required field or has an unreadable ID."""

    kind = ErrorKind.MISSING_FIELD


class InvalidScoreFormatError(DomainException):
    """A score field is not a valid integer."""

    kind = ErrorKind.INVALID_SCORE_FORMAT


class PersistenceError(DomainException):
    """Reading or writing a file failed."""

    kind = ErrorKind.IO_FAILURE
