"""Shared fixtures for lingua tests."""

import logging
import os

import pytest
import structlog

from lingua.configuration import I18nSettings, Settings


@pytest.fixture(scope="session", autouse=True)
def silence_logging():
    """Route structlog through stdlib logging with everything suppressed."""
    # Logs are not emitted because the root logger level is above CRITICAL
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Settings instance independent of the process environment."""
    return Settings(PREFIX="test", LOG_LEVEL="DEBUG", i18n=I18nSettings())


@pytest.fixture(autouse=True)
def clean_lingua_env(monkeypatch):
    """Remove LINGUA_* variables so settings tests see defaults."""
    for name in list(os.environ):
        if name.startswith("LINGUA_"):
            monkeypatch.delenv(name, raising=False)
