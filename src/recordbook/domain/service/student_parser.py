"""Domain service: parsing ``id,fullName,score`` lines into Students.

Parsing is all-or-nothing: the first malformed line aborts the batch.
"""

from __future__ import annotations

import re
from typing import Iterable

from recordbook.domain.exceptions import InvalidScoreFormatError, MissingFieldError
from recordbook.domain.model.student import Student

FIELD_COUNT = 3
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_student_line(line: str) -> Student:
    """Parse one line into a Student.

    Raises MissingFieldError when the line does not have exactly three
    fields or the ID is not an integer, and InvalidScoreFormatError when
    the score is not an integer.
    """
    parts = line.split(",")
    if len(parts) != FIELD_COUNT:
        raise MissingFieldError(f"Line '{line}' is missing required fields.")

    id_str, full_name, score_str = (part.strip() for part in parts)
    # ASCII digits only; int() would also take "8_5" and non-Latin digits
    if not _INTEGER.fullmatch(id_str):
        raise MissingFieldError(f"Invalid ID format in line: '{line}'")
    if not _INTEGER.fullmatch(score_str):
        raise InvalidScoreFormatError(f"Score '{score_str}' is not a valid integer.")

    return Student(id=int(id_str), full_name=full_name, score=int(score_str))


def parse_student_lines(lines: Iterable[str]) -> list[Student]:
    return [parse_student_line(line.rstrip("\r\n")) for line in lines]
