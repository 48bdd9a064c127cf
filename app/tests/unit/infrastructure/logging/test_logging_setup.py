"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- Console vs JSON rendering outside of tests
- get_module_logger context binding
"""

import logging

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


def _renderer_types():
    return [type(p) for p in structlog.get_config()["processors"]]


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_logging_suppressed_during_tests(self, mock_settings):
        configure_logging(settings=mock_settings, log_level="DEBUG")
        assert logging.root.level > logging.CRITICAL

    def test_console_renderer_in_development(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings)

        assert structlog.dev.ConsoleRenderer in _renderer_types()
        assert logging.root.level == logging.INFO

    def test_json_renderer_in_production(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        mock_settings.is_production = True

        configure_logging(settings=mock_settings)

        assert structlog.processors.JSONRenderer in _renderer_types()

    def test_overrides_win_over_settings(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        mock_settings.is_production = True

        configure_logging(settings=mock_settings, log_level="warning", is_production=False)

        assert structlog.dev.ConsoleRenderer in _renderer_types()
        assert logging.root.level == logging.WARNING

    def test_context_variables_are_merged(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings)

        assert structlog.contextvars.merge_contextvars in structlog.get_config()["processors"]


@pytest.mark.unit
class TestGetLoggers:
    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()
        assert logger._context["module_path"] == __name__
        assert logger._context["component"] == __name__.split(".")[-1]
