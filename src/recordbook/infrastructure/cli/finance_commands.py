"""CLI command for the transaction-processing demo."""

from __future__ import annotations

import click

from recordbook.infrastructure import bootstrap, seed


@click.command("finance")
def finance_run() -> None:
    """Process three transactions against a savings account."""
    handler = bootstrap.finance()
    report = handler.run(seed.transaction_batch(bootstrap.now()))

    for outcome in report.outcomes:
        if outcome.channel_message:
            click.echo(outcome.channel_message)
    click.echo()
    for outcome in report.outcomes:
        if outcome.error is not None and not outcome.channel_message:
            click.echo(f"Error: {outcome.account_message}")
        else:
            click.echo(outcome.account_message)

    click.echo()
    click.echo(
        f"Account {report.account_number}: "
        f"{report.opening_balance:.2f} -> {report.closing_balance:.2f} "
        f"({len(handler.transactions())} transactions recorded)"
    )
