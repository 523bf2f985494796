"""Interactive session command."""

import click

from budgettracker.cli.presenter import LedgerPresenter
from budgettracker.domain.entities import TransactionKind
from budgettracker.domain.errors import ValidationError
from budgettracker.domain.ledger import Ledger

SHELL_HELP = """Commands:
  income AMOUNT CATEGORY    Record income (category may contain spaces)
  expense AMOUNT CATEGORY   Record an expense
  totals                    Show balance, income, budget and expenses
  history [income|expense]  Show transactions, most recent first
  help                      Show this message
  quit                      Leave the session"""

QUIT_COMMANDS = ("quit", "exit")


def execute_line(ledger: Ledger, presenter: LedgerPresenter, line: str) -> bool:
    """Run one shell command line.

    Returns:
        False when the session should end, True otherwise
    """
    parts = line.strip().split(maxsplit=2)
    if not parts:
        return True

    command = parts[0].lower()

    if command in QUIT_COMMANDS:
        return False

    if command in (TransactionKind.INCOME.value, TransactionKind.EXPENSE.value):
        amount = parts[1] if len(parts) > 1 else ""
        category = parts[2] if len(parts) > 2 else ""
        try:
            record = ledger.record(TransactionKind(command), amount, category)
        except ValidationError as e:
            presenter.show_errors(e)
            return True
        click.echo(presenter.accepted_line(record))
        presenter.show_totals(ledger)
    elif command == "totals":
        presenter.show_totals(ledger)
    elif command == "history":
        kind = None
        if len(parts) > 1:
            try:
                kind = TransactionKind(parts[1].lower())
            except ValueError:
                click.echo(f"Error: Unknown transaction kind '{parts[1]}'", err=True)
                return True
        presenter.show_history(ledger, kind)
    elif command == "help":
        click.echo(SHELL_HELP)
    else:
        click.echo(
            f"Error: Unknown command '{parts[0]}'. Type 'help' for commands.", err=True
        )

    return True


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive budget session.

    Transactions live for the length of the session only.
    """
    ledger = ctx.obj["ledger"]
    presenter = ctx.obj["presenter"]

    click.echo("Budget Tracker. Type 'help' for commands.")
    while True:
        try:
            line = click.prompt("budget", default="", show_default=False)
        except click.Abort:
            # End of input
            click.echo()
            break
        if not execute_line(ledger, presenter, line):
            break

    click.echo(f"Session ended with {len(ledger)} transaction(s).")
    presenter.show_totals(ledger)


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(shell)
