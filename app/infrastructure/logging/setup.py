"""Structlog configuration and logger setup.

This module provides the core logging configuration for Folio.
It configures structlog with processors for debugging context,
proper exception formatting, and environment-aware rendering.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.services.providers.get_settings
"""

import logging
import sys
import inspect
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.stdlib import BoundLogger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Configures structlog with:
    - File/line/function context
    - Exception formatting with stack traces
    - Context variable merging for run identifiers
    - Test environment detection for log suppression

    Args:
        settings: Settings to read LOG_LEVEL and is_production from.
            Defaults to the application settings singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for production mode. Controls JSON
            vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors are still needed to avoid errors, but nothing is
        # emitted because the root logger level is set to CRITICAL + 1
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        # Add context variables (build id, navigation id)
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Pretty printing for development, JSON for production
    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
        force=True,
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging.

    Returns:
        Logger instance with module context

    Example:
        # In modules/navigation/controller.py
        logger = get_module_logger()
        # context: {"component": "controller", "module_path": "modules.navigation.controller"}
    """
    logger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return logger.bind(component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")
