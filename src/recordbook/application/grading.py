"""Application service: Generate Grade Report use case."""

from __future__ import annotations

import logging

from recordbook.domain.exceptions import DomainException
from recordbook.domain.repository.student_store import StudentResultStore
from recordbook.domain.result import Result

logger = logging.getLogger(__name__)


class StudentResultProcessor:

    def __init__(self, store: StudentResultStore) -> None:
        self._store = store

    def generate_report(self) -> Result[int]:
        """Read every student, then write the report.

        Nothing is written unless the whole input parsed, so a malformed
        line leaves no report behind.
        """
        try:
            students = self._store.read_students()
            count = self._store.write_report(students)
        except DomainException as exc:
            logger.warning("Report not generated: %s", exc)
            return Result.from_exception(exc)

        logger.info("Graded %d students", count)
        return Result.success(count, "Report generated successfully!")
