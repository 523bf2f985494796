"""Ledger domain service: transaction history plus running totals."""

import logging
from datetime import UTC, datetime
from typing import Callable, Optional, Union
from uuid import uuid4

from budgettracker.domain.entities import (
    LedgerTotals,
    TransactionKind,
    TransactionRecord,
)
from budgettracker.domain.errors import (
    INVALID_AMOUNT,
    MISSING_CATEGORY,
    ValidationError,
    invalid_amount,
    missing_category,
)
from budgettracker.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

RawAmount = Union[str, int, float]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return uuid4().hex


class Ledger:
    """Append-only transaction history with incrementally maintained totals.

    After every accepted operation:

        total_income    = sum of income amounts outside the budget category
        total_budget    = sum of income amounts in the budget category
        total_expenses  = sum of expense amounts
        current_balance = total_income - total_expenses

    The budget total is tracked on its own and never enters the balance.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize an empty ledger.

        Args:
            clock: Returns the creation timestamp for new records
            id_factory: Returns a unique identifier for new records
        """
        self._clock = clock or _utc_now
        self._id_factory = id_factory or _new_id
        self._history: list[TransactionRecord] = []
        self._total_income = 0.0
        self._total_expenses = 0.0
        self._total_budget = 0.0
        self._current_balance = 0.0

    def __len__(self) -> int:
        return len(self._history)

    def validate_input(self, amount: RawAmount, category: Optional[str]) -> tuple[float, str]:
        """Validate raw form input.

        Args:
            amount: Raw amount, as typed or as a number
            category: Category label

        Returns:
            Tuple of parsed amount and trimmed category

        Raises:
            ValidationError: Listing every field that failed
        """
        errors: dict[str, str] = {}

        parsed_amount = 0.0
        try:
            parsed_amount = parse_amount(amount)
        except ValueError:
            errors[INVALID_AMOUNT] = invalid_amount()
        else:
            if parsed_amount <= 0:
                errors[INVALID_AMOUNT] = invalid_amount("must be greater than zero")

        cleaned_category = (category or "").strip()
        if not cleaned_category:
            errors[MISSING_CATEGORY] = missing_category()

        if errors:
            logger.info(
                "Rejected input amount=%r category=%r: %s",
                amount,
                category,
                ", ".join(sorted(errors)),
            )
            raise ValidationError(errors)

        return parsed_amount, cleaned_category

    def record_income(self, amount: RawAmount, category: Optional[str]) -> TransactionRecord:
        """Record an income transaction.

        Income in the "Total Budget" category adds to the budget total only.
        Any other income adds to both the income total and the balance.

        Raises:
            ValidationError: If the amount or category is invalid; the ledger
                is left unchanged
        """
        value, label = self.validate_input(amount, category)
        record = self._new_record(value, label, TransactionKind.INCOME)

        if record.is_budget:
            self._total_budget += value
        else:
            self._total_income += value
            self._current_balance += value

        return self._append(record)

    def record_expense(self, amount: RawAmount, category: Optional[str]) -> TransactionRecord:
        """Record an expense transaction.

        Raises:
            ValidationError: If the amount or category is invalid; the ledger
                is left unchanged
        """
        value, label = self.validate_input(amount, category)
        record = self._new_record(value, label, TransactionKind.EXPENSE)

        self._total_expenses += value
        self._current_balance -= value

        return self._append(record)

    def record(
        self, kind: TransactionKind, amount: RawAmount, category: Optional[str]
    ) -> TransactionRecord:
        """Record a transaction of the given kind."""
        if TransactionKind(kind) is TransactionKind.INCOME:
            return self.record_income(amount, category)
        return self.record_expense(amount, category)

    def totals(self) -> LedgerTotals:
        """Return a snapshot of the running totals."""
        return LedgerTotals(
            income=self._total_income,
            expenses=self._total_expenses,
            budget=self._total_budget,
            balance=self._current_balance,
        )

    @property
    def current_balance(self) -> float:
        return self._current_balance

    @property
    def total_income(self) -> float:
        return self._total_income

    @property
    def total_expenses(self) -> float:
        return self._total_expenses

    @property
    def total_budget(self) -> float:
        return self._total_budget

    def all_transactions(self) -> tuple[TransactionRecord, ...]:
        """Return every record in the order it was accepted."""
        return tuple(self._history)

    def recent_transactions(self) -> tuple[TransactionRecord, ...]:
        """Return every record, most recent first."""
        return tuple(reversed(self._history))

    def income_transactions(self) -> tuple[TransactionRecord, ...]:
        return self.transactions_of_kind(TransactionKind.INCOME)

    def expense_transactions(self) -> tuple[TransactionRecord, ...]:
        return self.transactions_of_kind(TransactionKind.EXPENSE)

    def transactions_of_kind(self, kind: TransactionKind) -> tuple[TransactionRecord, ...]:
        """Return records of one kind in the order they were accepted."""
        kind = TransactionKind(kind)
        return tuple(record for record in self._history if record.kind is kind)

    def _new_record(
        self, amount: float, category: str, kind: TransactionKind
    ) -> TransactionRecord:
        return TransactionRecord(
            id=self._id_factory(),
            amount=amount,
            category=category,
            kind=kind,
            created_at=self._clock(),
        )

    def _append(self, record: TransactionRecord) -> TransactionRecord:
        self._history.append(record)
        logger.debug(
            "Recorded %s %.2f in '%s' (id=%s)",
            record.kind.value,
            record.amount,
            record.category,
            record.id,
        )
        return record
