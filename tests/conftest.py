"""Top-level pytest configuration for bashmaqawa."""

import logging
import os

import pytest

from bashmaqawa.config import clear_settings_cache
from bashmaqawa.logging import ROOT_LOGGER_NAME, LoggingSettings, configure_logging

# Configure asyncio to be less verbose
os.environ["PYTHONASYNCIODEBUG"] = "0"

ENV_KEYS = (
    "BASHMAQAWA_ENV",
    "BASHMAQAWA_APP_NAME",
    "BASHMAQAWA_LOCALE",
    "BASHMAQAWA_STARTUP_TIMEOUT_SECONDS",
)


def pytest_configure(config):
    """Configure pytest to recognize our custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (deselect with '-m "
        "not integration')",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that influence settings."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


@pytest.fixture
def captured_logs(caplog):
    """Route package logs through caplog at DEBUG level."""
    configure_logging(
        LoggingSettings(level="DEBUG", console_enabled=False, propagate=True)
    )
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    yield caplog
    configure_logging(LoggingSettings(console_enabled=False))
