"""Display formatting for amounts and dates."""

from datetime import datetime

from budgettracker.domain.entities import TransactionRecord

DEFAULT_CURRENCY_SYMBOL = "$"
# Locale's date representation
DEFAULT_DATE_FORMAT = "%x"


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a float as currency string, e.g. '$1234.56' or '$-60.00'."""
    return f"{symbol}{amount:.2f}"


def format_signed(
    record: TransactionRecord, symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> str:
    """Format a record's amount with '+' for income and '-' for expenses."""
    sign = "+" if record.is_income else "-"
    return f"{sign}{format_currency(record.amount, symbol)}"


def format_date(value: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a timestamp as a date in the local time zone."""
    return value.astimezone().strftime(date_format)
