"""CLI command for the warehouse demo.

Each operation reports its own outcome; a failure is printed and the
run moves on to the next step.
"""

from __future__ import annotations

from datetime import timedelta

import click

from recordbook.domain.model.stock import GroceryItem
from recordbook.domain.result import Result
from recordbook.infrastructure import bootstrap


def _report(result: Result) -> None:
    if result.ok:
        click.echo(result.message)
    else:
        click.echo(f"Error: {result.message}")


@click.command("warehouse")
def warehouse_run() -> None:
    """Print stock, then exercise the error paths."""
    today = bootstrap.now().date()
    manager = bootstrap.warehouse(today)

    click.echo("---- Grocery Items ----")
    for item in manager.list_items(manager.groceries):
        click.echo(str(item))

    click.echo()
    click.echo("---- Electronic Items ----")
    for item in manager.list_items(manager.electronics):
        click.echo(str(item))

    click.echo()
    click.echo("--- Testing Exceptions ---")
    _report(manager.add_item(
        manager.groceries, GroceryItem(1, "Bananas", 20, today + timedelta(days=7))
    ))
    _report(manager.remove_item(manager.electronics, 99))
    _report(manager.update_quantity(manager.groceries, 2, -5))

    click.echo()
    click.echo("--- Restocking ---")
    _report(manager.increase_stock(manager.electronics, 1, 5))
