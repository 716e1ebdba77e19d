"""CLI commands for the inventory log."""

from __future__ import annotations

from pathlib import Path

import click

from recordbook.infrastructure import bootstrap, seed

_file_option = click.option(
    "--file", "file_path", default="inventory.json", show_default=True,
    type=click.Path(dir_okay=False, path_type=Path), help="JSON snapshot file.",
)


def _print_records(handler) -> None:
    records = handler.list_all()
    if not records:
        click.echo("No inventory records found.")
        return
    for record in records:
        click.echo(str(record))


@click.command("run")
@_file_option
def inventory_run(file_path: Path) -> None:
    """Seed the log, save it, then reload it in a fresh session."""
    settings = bootstrap.Settings(inventory_file=file_path)

    # First session: seed and save
    handler = bootstrap.inventory_log(settings)
    handler.seed(seed.inventory_records(bootstrap.now()))
    result = handler.save()
    if not result.ok:
        raise click.ClickException(result.message)
    click.echo(result.message)

    click.echo()
    click.echo("--- New Session ---")
    click.echo()

    handler = bootstrap.inventory_log(settings)
    result = handler.load()
    if not result.ok:
        raise click.ClickException(result.message)
    click.echo(result.message)
    _print_records(handler)


@click.command("show")
@_file_option
def inventory_show(file_path: Path) -> None:
    """Load the snapshot and print every record."""
    handler = bootstrap.inventory_log(bootstrap.Settings(inventory_file=file_path))
    result = handler.load()
    if not result.ok:
        raise click.ClickException(result.message)
    _print_records(handler)
