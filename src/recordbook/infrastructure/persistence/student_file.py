"""Flat-text-file implementation of StudentResultStore."""

from __future__ import annotations

import logging
from pathlib import Path

from recordbook.domain.exceptions import PersistenceError
from recordbook.domain.model.student import Student
from recordbook.domain.repository.student_store import StudentResultStore
from recordbook.domain.service.student_parser import parse_student_lines

logger = logging.getLogger(__name__)


class FlatFileStudentStore(StudentResultStore):

    def __init__(self, input_path: Path, output_path: Path) -> None:
        self._input_path = Path(input_path)
        self._output_path = Path(output_path)

    def read_students(self) -> list[Student]:
        try:
            with open(self._input_path, encoding="utf-8") as handle:
                students = parse_student_lines(handle)
        except FileNotFoundError as exc:
            raise PersistenceError("Input file not found.") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._input_path}: {exc}") from exc
        logger.debug("Read %d students from %s", len(students), self._input_path)
        return students

    def write_report(self, students: list[Student]) -> int:
        lines = [student.report_line() for student in students]
        try:
            with open(self._output_path, "w", encoding="utf-8") as handle:
                for line in lines:
                    handle.write(line + "\n")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._output_path}: {exc}") from exc
        logger.debug("Wrote %d report lines to %s", len(lines), self._output_path)
        return len(lines)
