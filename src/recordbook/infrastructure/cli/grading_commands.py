"""CLI command for the grade report."""

from __future__ import annotations

from pathlib import Path

import click

from recordbook.domain.exceptions import ErrorKind
from recordbook.infrastructure import bootstrap

_ERROR_PREFIX = {
    ErrorKind.INVALID_SCORE_FORMAT: "Invalid score format: ",
    ErrorKind.MISSING_FIELD: "Missing field: ",
    ErrorKind.IO_FAILURE: "",
}


@click.command("grading")
@click.option(
    "--input", "input_path", default="students.txt", show_default=True,
    type=click.Path(dir_okay=False, path_type=Path), help="Lines of 'id,fullName,score'.",
)
@click.option(
    "--output", "output_path", default="report.txt", show_default=True,
    type=click.Path(dir_okay=False, path_type=Path), help="Report destination.",
)
def grading_report(input_path: Path, output_path: Path) -> None:
    """Grade every student in the input file and write a report."""
    settings = bootstrap.Settings(students_file=input_path, report_file=output_path)
    result = bootstrap.student_processor(settings).generate_report()

    if not result.ok:
        prefix = _ERROR_PREFIX.get(result.error, "An unexpected error occurred: ")
        raise click.ClickException(prefix + result.message)

    click.echo(result.message)
