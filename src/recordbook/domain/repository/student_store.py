"""Abstract source of student results and sink for the grade report."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordbook.domain.model.student import Student


class StudentResultStore(ABC):

    @abstractmethod
    def read_students(self) -> list[Student]:
        """Return every student in the input, failing on the first bad line."""

    @abstractmethod
    def write_report(self, students: list[Student]) -> int:
        """Write one report line per student; returns the number written."""
