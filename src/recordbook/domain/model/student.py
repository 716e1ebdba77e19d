"""Student record and the grading scale."""

from __future__ import annotations

from dataclasses import dataclass

# (lower bound, upper bound, letter), checked in order
GRADE_BANDS: tuple[tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    """Return the letter grade for *score*.

    Anything outside the bands, including scores above 100, is an F.
    """
    for low, high, letter in GRADE_BANDS:
        if low <= score <= high:
            return letter
    return FAILING_GRADE


@dataclass
class Student:

    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    def report_line(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )
