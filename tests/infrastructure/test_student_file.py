"""Tests for the flat-file student store."""

import pytest

from recordbook.domain.exceptions import InvalidScoreFormatError, MissingFieldError, PersistenceError
from recordbook.infrastructure.persistence.student_file import FlatFileStudentStore


class TestFlatFileStudentStore:

    def test_read_students(self, tmp_path):
        source = tmp_path / "students.txt"
        source.write_text("1,Alice Johnson,85\n2,Bob,55\n", encoding="utf-8")
        students = FlatFileStudentStore(source, tmp_path / "report.txt").read_students()
        assert [(s.id, s.full_name, s.score) for s in students] == [
            (1, "Alice Johnson", 85),
            (2, "Bob", 55),
        ]

    def test_missing_input(self, tmp_path):
        store = FlatFileStudentStore(tmp_path / "nope.txt", tmp_path / "report.txt")
        with pytest.raises(PersistenceError, match="Input file not found."):
            store.read_students()

    def test_malformed_lines(self, tmp_path):
        source = tmp_path / "students.txt"
        source.write_text("1,Alice\n", encoding="utf-8")
        with pytest.raises(MissingFieldError):
            FlatFileStudentStore(source, tmp_path / "r.txt").read_students()

        source.write_text("1,Alice,A+\n", encoding="utf-8")
        with pytest.raises(InvalidScoreFormatError):
            FlatFileStudentStore(source, tmp_path / "r.txt").read_students()

    def test_write_report(self, tmp_path):
        source = tmp_path / "students.txt"
        target = tmp_path / "report.txt"
        source.write_text("1,Alice Johnson,85\n2,Bob,55", encoding="utf-8")
        store = FlatFileStudentStore(source, target)
        assert store.write_report(store.read_students()) == 2
        assert target.read_text(encoding="utf-8").splitlines() == [
            "Alice Johnson (ID: 1): Score = 85, Grade = A",
            "Bob (ID: 2): Score = 55, Grade = D",
        ]

    def test_undecodable_input(self, tmp_path):
        source = tmp_path / "students.txt"
        source.write_bytes(b"1,Ren\xe9e,85\n")
        store = FlatFileStudentStore(source, tmp_path / "report.txt")
        with pytest.raises(PersistenceError, match="Cannot read"):
            store.read_students()
