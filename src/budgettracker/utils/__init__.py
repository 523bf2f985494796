"""Utility functions for the budget tracker."""

from budgettracker.utils.amount_parser import parse_amount
from budgettracker.utils.formatting import format_currency, format_date, format_signed

__all__ = ["parse_amount", "format_currency", "format_date", "format_signed"]
