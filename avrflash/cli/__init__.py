"""Command-line interface for avrflash."""

from avrflash.cli.app import app, main


__all__ = ["app", "main"]
