"""Helper functions for CLI output formatting with Rich integration."""

from avrflash.cli.helpers.theme import get_themed_console
from avrflash.pipeline import PipelineResult, PipelineState


def print_progress_message(label: str, message: str) -> None:
    """Print a right-aligned green progress label followed by a message."""
    get_themed_console().print_progress(label, message)


def print_warning_message(message: str) -> None:
    """Print a message with a yellow `warning:` prefix."""
    get_themed_console().print_warning(message)


def print_error_message(message: str) -> None:
    """Print a message with a red `error:` prefix."""
    get_themed_console().print_error(message)


def print_pipeline_result(result: PipelineResult) -> None:
    """Report the parts of a run the user has not seen yet.

    Progress lines are printed while the pipeline runs; this covers the
    no-binary warning and every error of a failed run.
    """
    console = get_themed_console()

    if result.state == PipelineState.NO_BINARY:
        for message in result.messages:
            console.print_warning(message)

    for error in result.errors:
        console.print_error(error)
