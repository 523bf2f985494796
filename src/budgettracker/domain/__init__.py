"""Domain layer for the budget tracker."""

from budgettracker.domain.entities import (
    TOTAL_BUDGET_CATEGORY,
    LedgerTotals,
    TransactionKind,
    TransactionRecord,
)
from budgettracker.domain.errors import DomainError, ValidationError
from budgettracker.domain.ledger import Ledger

__all__ = [
    "TOTAL_BUDGET_CATEGORY",
    "LedgerTotals",
    "TransactionKind",
    "TransactionRecord",
    "DomainError",
    "ValidationError",
    "Ledger",
]
