"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for Folio using structlog.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_module_logger(): Get a logger for the calling module
    - bind_log_context(): Context manager for run-scoped logging

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import bind_log_context

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_log_context",
]
