"""Shared pytest fixtures for budget tracker tests."""

from datetime import datetime, UTC
from itertools import count

import pytest

from budgettracker.cli.presenter import LedgerPresenter
from budgettracker.config import AppConfig
from budgettracker.domain.ledger import Ledger

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    """Sequential id factory: txn-1, txn-2, ..."""
    counter = count(1)
    return lambda: f"txn-{next(counter)}"


@pytest.fixture
def ledger(fixed_clock, id_factory):
    """Create an empty Ledger with deterministic ids and timestamps."""
    return Ledger(clock=fixed_clock, id_factory=id_factory)


@pytest.fixture
def sample_ledger(ledger):
    """Ledger holding the salary / food / budget example."""
    ledger.record_income(100, "Salary")
    ledger.record_expense(40, "Food")
    ledger.record_income(50, "Total Budget")
    return ledger


@pytest.fixture
def presenter():
    """Presenter with a fixed date format."""
    return LedgerPresenter(AppConfig(date_format="%Y-%m-%d"))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
