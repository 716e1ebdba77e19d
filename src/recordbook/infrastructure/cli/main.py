import logging

import click

from recordbook.infrastructure.cli.finance_commands import finance_run
from recordbook.infrastructure.cli.grading_commands import grading_report
from recordbook.infrastructure.cli.healthcare_commands import healthcare_show
from recordbook.infrastructure.cli.inventory_commands import inventory_run, inventory_show
from recordbook.infrastructure.cli.warehouse_commands import warehouse_run


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """recordbook: in-memory record-keeping demos"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def inventory() -> None:
    """Inventory log backed by a JSON snapshot."""


# Register subcommands
cli.add_command(healthcare_show)
cli.add_command(grading_report)
cli.add_command(warehouse_run)
cli.add_command(finance_run)
inventory.add_command(inventory_run)
inventory.add_command(inventory_show)
