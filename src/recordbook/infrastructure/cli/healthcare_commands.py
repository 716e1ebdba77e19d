"""CLI command for the patient/prescription tracker."""

from __future__ import annotations

import click

from recordbook.infrastructure import bootstrap


@click.command("healthcare")
@click.option(
    "--patient-id", default=2, show_default=True, type=int,
    help="Patient whose prescriptions are listed.",
)
def healthcare_show(patient_id: int) -> None:
    """List all patients and one patient's prescriptions."""
    handler = bootstrap.health_system()
    handler.build_prescription_map()

    click.echo("All Patients:")
    for patient in handler.list_patients():
        click.echo(str(patient))

    click.echo()
    click.echo(f"Prescriptions for PatientId {patient_id}:")
    prescriptions = handler.prescriptions_for(patient_id)
    if not prescriptions:
        click.echo("No prescriptions found for this patient.")
        return
    for prescription in prescriptions:
        click.echo(str(prescription))
