"""Tests for configuration defaults and logging setup."""

from budgettracker.config import AppConfig


def test_app_config_defaults():
    config = AppConfig()
    assert config.currency_symbol == "$"
    assert config.date_format == "%x"
    assert config.log_level == "WARNING"
