"""Text rendering of ledger state for the CLI.

The presenter only reads the ledger's public contract and never mutates it.
"""

from typing import Iterable, Optional

import click

from budgettracker.config import AppConfig
from budgettracker.domain.entities import LedgerTotals, TransactionKind, TransactionRecord
from budgettracker.domain.errors import INVALID_AMOUNT, MISSING_CATEGORY, ValidationError
from budgettracker.domain.ledger import Ledger
from budgettracker.utils.formatting import format_currency, format_date, format_signed

EMPTY_HISTORY_MESSAGE = "No transactions yet."

# Display order for field errors
FIELD_LABELS = (
    (INVALID_AMOUNT, "amount"),
    (MISSING_CATEGORY, "category"),
)


class LedgerPresenter:
    """Render totals, history and validation errors as text lines."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

    def money(self, amount: float) -> str:
        return format_currency(amount, self.config.currency_symbol)

    def totals_lines(self, totals: LedgerTotals) -> list[str]:
        return [
            f"Balance:  {self.money(totals.balance)}",
            f"Income:   {self.money(totals.income)}",
            f"Budget:   {self.money(totals.budget)}",
            f"Expenses: {self.money(totals.expenses)}",
        ]

    def record_line(self, record: TransactionRecord) -> str:
        date_str = format_date(record.created_at, self.config.date_format)
        amount_str = format_signed(record, self.config.currency_symbol)
        return f"{date_str}  {record.category:<20} {amount_str:>14}"

    def history_lines(self, records: Iterable[TransactionRecord]) -> list[str]:
        lines = [self.record_line(record) for record in records]
        return lines or [EMPTY_HISTORY_MESSAGE]

    def error_lines(self, error: ValidationError) -> list[str]:
        lines = []
        for field, label in FIELD_LABELS:
            if field in error.messages:
                lines.append(f"Error ({label}): {error.messages[field]}")
        return lines

    def accepted_line(self, record: TransactionRecord) -> str:
        kind = "income" if record.is_income else "expense"
        return f"Recorded {kind}: {record.category} {format_signed(record, self.config.currency_symbol)}"

    def show_totals(self, ledger: Ledger) -> None:
        click.echo("Totals")
        for line in self.totals_lines(ledger.totals()):
            click.echo(f"  {line}")

    def show_history(
        self, ledger: Ledger, kind: Optional[TransactionKind] = None
    ) -> None:
        """Print history most recent first, optionally for one kind."""
        if kind is None:
            records = ledger.recent_transactions()
        else:
            records = tuple(reversed(ledger.transactions_of_kind(kind)))
        click.echo("History")
        for line in self.history_lines(records):
            click.echo(f"  {line}")

    def show_errors(self, error: ValidationError) -> None:
        for line in self.error_lines(error):
            click.echo(line, err=True)
