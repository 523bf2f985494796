"""Domain model entities for the budget tracker.

These are pure data classes with no dependency on any rendering
environment, so the ledger can be driven and tested headless.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Income recorded under this category feeds the budget total instead of
# income and balance.
TOTAL_BUDGET_CATEGORY = "Total Budget"


class TransactionKind(str, Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class TransactionRecord:
    """One accepted income or expense event."""

    id: str
    amount: float
    category: str
    kind: TransactionKind
    created_at: datetime

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    @property
    def is_budget(self) -> bool:
        """True when this record feeds the budget total."""
        return self.is_income and self.category == TOTAL_BUDGET_CATEGORY

    @property
    def signed_amount(self) -> float:
        """Amount with expenses negated."""
        return self.amount if self.is_income else -self.amount


@dataclass(frozen=True)
class LedgerTotals:
    """Snapshot of the four running totals."""

    income: float = 0.0
    expenses: float = 0.0
    budget: float = 0.0
    balance: float = 0.0
