"""Main CLI application for avrflash."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import click
import typer
from typer.core import TyperCommand

from avrflash.cli.decorators.error_handling import (
    handle_errors,
    print_stack_trace_if_verbose,
)
from avrflash.cli.helpers.output import (
    print_pipeline_result,
    print_progress_message,
    print_warning_message,
)
from avrflash.config.settings import load_settings
from avrflash.core.logging import setup_logging
from avrflash.core.structlog_logger import get_struct_logger
from avrflash.pipeline import create_flash_pipeline


__all__ = ["app", "main", "__version__"]


__version__ = distribution("avrflash").version

logger = get_struct_logger(__name__)

SUBCOMMAND_NAME = "avrflash"
EXECUTABLE_NAME = f"cargo-{SUBCOMMAND_NAME}"
OPTIONS_SEPARATOR = "--"


def strip_subcommand_name(args: list[str]) -> list[str]:
    """Drop the subcommand name cargo passes as the first argument.

    When run as `cargo avrflash ...`, cargo executes
    `cargo-avrflash avrflash ...`. Anything else still works but gets a
    warning.
    """
    if args and args[0] == SUBCOMMAND_NAME:
        return args[1:]

    print_warning_message(
        f"expected `{SUBCOMMAND_NAME}` as the first argument. {EXECUTABLE_NAME} "
        "is intended to be invoked as a cargo subcommand"
    )
    return list(args)


def version_callback(value: bool) -> None:
    if value:
        print(f"{EXECUTABLE_NAME} {__version__}")
        raise typer.Exit()


HELP_TEXT = f"""{EXECUTABLE_NAME} v{__version__}

Builds the binary and passes it to an arbitrary programmer command.

The programmer arguments come from `package.metadata.avrflash.args` in the
Cargo.toml of the package owning the binary; `{{}}` in any argument is
replaced with the path of the built executable. All other options are
passed to `cargo build`, as is everything after `--`."""


class CargoPassthroughCommand(TyperCommand):
    """Command that hands everything from `--` on to cargo unparsed.

    click drops the separator itself, so the tail is split off before
    parsing and appended to `cargo_options` afterwards.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        trailing: list[str] = []
        if OPTIONS_SEPARATOR in args:
            index = args.index(OPTIONS_SEPARATOR)
            args, trailing = args[:index], args[index:]

        remaining = super().parse_args(ctx, args)
        if trailing:
            ctx.params["cargo_options"] = [
                *(ctx.params.get("cargo_options") or ()),
                *trailing,
            ]
        return remaining


app = typer.Typer(
    name=EXECUTABLE_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(
    cls=CargoPassthroughCommand,
    help=HELP_TEXT,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    }
)
@handle_errors
def flash(
    cargo_options: Annotated[
        list[str] | None,
        typer.Argument(help="Options passed to cargo build", show_default=False),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Also log to this file")
    ] = None,
    flash_config: Annotated[
        str | None,
        typer.Option("--flash-config", help="Path to an avrflash YAML config file"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Build the binary and flash it with the configured programmer."""
    options = strip_subcommand_name(list(cargo_options or []))

    settings = load_settings(flash_config)
    setup_logging(logging.DEBUG if debug else settings.log_level, log_file=log_file)
    logger.debug("cargo_options", options=options)

    pipeline = create_flash_pipeline(settings, on_progress=print_progress_message)
    result = pipeline.run(options)
    logger.debug("pipeline_finished", state=result.state, **result.get_summary())

    print_pipeline_result(result)
    raise typer.Exit(result.exit_code)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        print_stack_trace_if_verbose()
        return 1


if __name__ == "__main__":
    sys.exit(main())
