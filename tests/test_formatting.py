"""Tests for display formatting."""

import time
from datetime import datetime, UTC

import pytest

from budgettracker.domain.entities import TransactionKind, TransactionRecord
from budgettracker.utils.formatting import format_currency, format_date, format_signed


def _record(kind, amount=40.0):
    return TransactionRecord(
        id="txn-1",
        amount=amount,
        category="Food",
        kind=kind,
        created_at=datetime(2024, 3, 5, 12, 0, tzinfo=UTC),
    )


@pytest.fixture
def local_timezone(monkeypatch):
    """Switch the process time zone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def set_zone(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield set_zone
    monkeypatch.undo()
    time.tzset()


def test_format_currency():
    assert format_currency(0) == "$0.00"
    assert format_currency(1234.5) == "$1234.50"
    assert format_currency(-60) == "$-60.00"
    assert format_currency(3, symbol="€") == "€3.00"


def test_format_signed():
    assert format_signed(_record(TransactionKind.INCOME, 100)) == "+$100.00"
    assert format_signed(_record(TransactionKind.EXPENSE)) == "-$40.00"
    assert format_signed(_record(TransactionKind.INCOME, 2500)) == "+$2500.00"


def test_format_date():
    value = datetime(2024, 3, 5, 12, 0, tzinfo=UTC)
    assert format_date(value, "%Y-%m-%d") == "2024-03-05"
    assert format_date(value)  # locale format, content depends on host


def test_format_date_uses_local_time_zone(local_timezone):
    # 03:00 UTC on the 16th is still the evening of the 15th in Los Angeles
    value = datetime(2024, 1, 16, 3, 0, tzinfo=UTC)

    local_timezone("America/Los_Angeles")
    assert format_date(value, "%Y-%m-%d") == "2024-01-15"

    local_timezone("UTC")
    assert format_date(value, "%Y-%m-%d") == "2024-01-16"
