"""Run-scoped context binding for structured logging.

Binds an identifier for the current unit of work (a site build, one
in-page navigation) so every log entry made while it runs carries it.

Usage:
    from infrastructure.logging import bind_log_context

    with bind_log_context(run_id="build-1", output_dir="dist"):
        logger.info("build_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator

import structlog


@contextmanager
def bind_log_context(
    run_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind run-scoped context to all logs within the context manager.

    Args:
        run_id: Unique identifier of the unit of work. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The bound run identifier.
    """
    context: dict[str, Any] = {"run_id": run_id or uuid.uuid4().hex[:12]}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
