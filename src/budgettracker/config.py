"""Runtime configuration: display preferences and logging."""

import logging
from dataclasses import dataclass

from budgettracker.utils.formatting import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DATE_FORMAT

CURRENCY_ENV = "BUDGET_TRACKER_CURRENCY"
DATE_FORMAT_ENV = "BUDGET_TRACKER_DATE_FORMAT"
LOG_LEVEL_ENV = "BUDGET_TRACKER_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    """Display and logging preferences."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
