"""Shared domain error messages and error types."""

from typing import Mapping, Optional

INVALID_AMOUNT = "invalid_amount"
MISSING_CATEGORY = "missing_category"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Rejected transaction input.

    Carries every field that failed, keyed by field name, so a caller can
    surface them all at once.
    """

    def __init__(self, messages: Mapping[str, str]):
        if not messages:
            raise ValueError("ValidationError requires at least one field")
        self.messages = dict(messages)
        super().__init__("; ".join(self.messages.values()))

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(self.messages)

    @property
    def invalid_amount(self) -> bool:
        return INVALID_AMOUNT in self.messages

    @property
    def missing_category(self) -> bool:
        return MISSING_CATEGORY in self.messages


def invalid_amount(detail: Optional[str] = None) -> str:
    """Return message for an amount that is not a positive number."""
    if detail:
        return f"Please enter a valid amount ({detail})"
    return "Please enter a valid amount"


def missing_category() -> str:
    """Return message for an empty category."""
    return "Please select a category"
