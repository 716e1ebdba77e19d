"""In-memory fakes for the storage abstractions.

These implement the same abstract interfaces as the file-backed stores
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from recordbook.domain.exceptions import PersistenceError
from recordbook.domain.model.student import Student
from recordbook.domain.repository.snapshot_store import SnapshotStore
from recordbook.domain.repository.student_store import StudentResultStore
from recordbook.domain.service.student_parser import parse_student_lines

T = TypeVar("T")


class FakeSnapshotStore(SnapshotStore[T]):

    def __init__(self, entities: list[T] | None = None, fail_with: str | None = None) -> None:
        self._entities = list(entities) if entities is not None else None
        self._fail_with = fail_with

    def exists(self) -> bool:
        return self._entities is not None

    def save(self, entities: Iterable[T]) -> int:
        if self._fail_with:
            raise PersistenceError(self._fail_with)
        self._entities = list(entities)
        return len(self._entities)

    def load(self) -> list[T]:
        if self._fail_with:
            raise PersistenceError(self._fail_with)
        return list(self._entities or [])


class FakeStudentStore(StudentResultStore):

    def __init__(self, text: str | None) -> None:
        self._text = text
        self.report: list[str] | None = None

    def read_students(self) -> list[Student]:
        if self._text is None:
            raise PersistenceError("Input file not found.")
        return parse_student_lines(self._text.splitlines())

    def write_report(self, students: list[Student]) -> int:
        self.report = [s.report_line() for s in students]
        return len(self.report)
