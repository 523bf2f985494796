"""Main CLI entry point."""

import logging

import click

from budgettracker.cli.presenter import LedgerPresenter
from budgettracker.config import (
    CURRENCY_ENV,
    DATE_FORMAT_ENV,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    LOG_LEVELS,
    AppConfig,
    configure_logging,
)
from budgettracker.domain.ledger import Ledger
from budgettracker.utils.formatting import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DATE_FORMAT

# Import and register all commands at module level
from budgettracker.cli.commands import run, shell

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--currency-symbol",
    default=DEFAULT_CURRENCY_SYMBOL,
    help="Currency symbol for amounts (overrides BUDGET_TRACKER_CURRENCY environment variable)",
    envvar=CURRENCY_ENV,
)
@click.option(
    "--date-format",
    default=DEFAULT_DATE_FORMAT,
    help="strftime format for dates (overrides BUDGET_TRACKER_DATE_FORMAT environment variable)",
    envvar=DATE_FORMAT_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    help="Logging level (overrides BUDGET_TRACKER_LOG_LEVEL environment variable)",
    envvar=LOG_LEVEL_ENV,
)
@click.pass_context
def cli(ctx, currency_symbol: str, date_format: str, log_level: str):
    """Budget Tracker - record income and expenses and watch your balance.

    Every invocation starts with an empty ledger; nothing is saved between runs.
    """
    ctx.ensure_object(dict)

    # Only build the session when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    config = AppConfig(
        currency_symbol=currency_symbol,
        date_format=date_format,
        log_level=log_level.upper(),
    )
    configure_logging(config.log_level)

    ctx.obj["config"] = config
    ctx.obj["ledger"] = Ledger()
    ctx.obj["presenter"] = LedgerPresenter(config)
    logger.info("Budget Tracker loaded")


# Register all commands
run.register_commands(cli)
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
