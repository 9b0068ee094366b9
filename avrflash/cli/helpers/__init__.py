"""CLI helper functions."""

from avrflash.cli.helpers.output import (
    print_error_message,
    print_pipeline_result,
    print_progress_message,
    print_warning_message,
)


__all__ = [
    "print_error_message",
    "print_pipeline_result",
    "print_progress_message",
    "print_warning_message",
]
