"""Batch entry command."""

import click

from budgettracker.domain.entities import TransactionKind
from budgettracker.domain.errors import ValidationError

KIND_CHOICE = click.Choice([kind.value for kind in TransactionKind], case_sensitive=False)


@click.command("run")
@click.option(
    "--entry",
    "-e",
    "entries",
    type=(KIND_CHOICE, str, str),
    multiple=True,
    metavar="KIND AMOUNT CATEGORY",
    help="Transaction to record, in order (e.g., -e income 100 Salary)",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Stop at the first rejected entry",
)
@click.option("--kind", type=KIND_CHOICE, help="Only show history of this kind")
@click.pass_context
def run_entries(ctx, entries: tuple, strict: bool, kind: str | None):
    """Record a series of transactions and show the resulting budget.

    Examples:
        budget run -e income 100 Salary -e expense 40 Food
        budget run -e income 500 "Total Budget" -e expense 12.50 Transport
    """
    ledger = ctx.obj["ledger"]
    presenter = ctx.obj["presenter"]

    rejected = 0
    for position, (entry_kind, amount, category) in enumerate(entries, start=1):
        try:
            record = ledger.record(TransactionKind(entry_kind.lower()), amount, category)
        except ValidationError as e:
            rejected += 1
            click.echo(f"Entry {position} rejected:", err=True)
            presenter.show_errors(e)
            if strict:
                ctx.exit(1)
            continue
        click.echo(presenter.accepted_line(record))

    presenter.show_totals(ledger)
    presenter.show_history(
        ledger, TransactionKind(kind.lower()) if kind is not None else None
    )

    if rejected:
        ctx.exit(1)


def register_commands(cli):
    """Register run command with main CLI."""
    cli.add_command(run_entries)
