"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from avrflash.cli.helpers.output import print_error_message
from avrflash.core.errors import AvrflashError, ConfigError
from avrflash.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)

INTERRUPTED_EXIT_CODE = 130


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle exceptions escaping a CLI command.

    Each error is reported once on stderr and the command exits with
    status 1 (130 when interrupted).
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except KeyboardInterrupt as e:
            print_error_message("interrupted")
            raise typer.Exit(INTERRUPTED_EXIT_CODE) from e
        except ConfigError as e:
            logger.debug("configuration_error", error=str(e))
            print_error_message(str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except AvrflashError as e:
            logger.debug("avrflash_error", error=str(e), error_type=type(e).__name__)
            print_error_message(str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_error_message(f"unexpected error: {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if debug mode is enabled."""
    if "--debug" in sys.argv:
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
