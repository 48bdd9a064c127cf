"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the silenced test configuration and empty context after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    configure_logging()
