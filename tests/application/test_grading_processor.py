"""Integration tests for the grade report use case."""

from recordbook.application.grading import StudentResultProcessor
from recordbook.domain.exceptions import ErrorKind
from recordbook.infrastructure.persistence.student_file import FlatFileStudentStore
from tests.fakes import FakeStudentStore


class TestGenerateReport:

    def test_report_lines(self):
        store = FakeStudentStore("1,Alice Johnson,85\n2,Bob,55")
        result = StudentResultProcessor(store).generate_report()
        assert result.ok
        assert result.value == 2
        assert result.message == "Report generated successfully!"
        assert store.report == [
            "Alice Johnson (ID: 1): Score = 85, Grade = A",
            "Bob (ID: 2): Score = 55, Grade = D",
        ]

    def test_missing_field_writes_nothing(self):
        store = FakeStudentStore("1,Alice")
        result = StudentResultProcessor(store).generate_report()
        assert result.error == ErrorKind.MISSING_FIELD
        assert store.report is None

    def test_bad_score(self):
        store = FakeStudentStore("1,Alice,ninety")
        result = StudentResultProcessor(store).generate_report()
        assert result.error == ErrorKind.INVALID_SCORE_FORMAT
        assert result.message == "Score 'ninety' is not a valid integer."

    def test_missing_input(self):
        result = StudentResultProcessor(FakeStudentStore(None)).generate_report()
        assert result.error == ErrorKind.IO_FAILURE
        assert result.message == "Input file not found."


class TestGenerateReportOnDisk:

    def test_bad_line_produces_no_output_file(self, tmp_path):
        source = tmp_path / "students.txt"
        target = tmp_path / "report.txt"
        source.write_text("1,Alice\n", encoding="utf-8")

        result = StudentResultProcessor(FlatFileStudentStore(source, target)).generate_report()

        assert result.error == ErrorKind.MISSING_FIELD
        assert not target.exists()
