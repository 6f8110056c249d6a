"""Shared test fixtures for al-ramy tests."""

import logging

import pytest

from alramy.app.config import get_settings

_ENV_VARS = (
    "ALRAMY_SESSION__TIMEZONE",
    "ALRAMY_LOGGING__SLOW_THRESHOLD_MS",
    "ALRAMY_SITE__NAME",
    "ALRAMY_LOGGING__LEVEL",
    "SESSION_TIMEZONE",
    "LOGGING_SLOW_THRESHOLD_MS",
    "SITE_NAME",
    "LOGGING_LEVEL",
    "LOGGING_SERVICE_NAME",
)


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Start every test from default settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    # Clear settings cache to pick up new env vars
    get_settings.cache_clear()

    yield

    # Clear cache after test
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
