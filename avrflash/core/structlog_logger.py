"""Structlog logger factory for avrflash."""

import logging
from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def log_error_with_context(
    logger: structlog.stdlib.BoundLogger,
    event: str,
    error: Exception,
    level: int = logging.ERROR,
    **context: Any,
) -> None:
    """Log an error with structured context and a debug-only stack trace.

    Pass level=logging.DEBUG for errors that are reported to the user
    through another channel.
    """
    exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
    error_context = dict(getattr(error, "context", {}) or {})
    error_context.update(context)
    logger.log(
        level,
        event,
        error=str(error),
        error_type=error.__class__.__name__,
        exc_info=exc_info,
        **error_context,
    )
