"""Programmer argument binding and outcome classification."""

from .arguments import PLACEHOLDER, instantiate_args, render_path
from .diagnostics import (
    DiagnosticFormat,
    DiagnosticLine,
    classify_outcome,
    match_diagnostic,
)
from .models import FlashOutcome


__all__ = [
    "PLACEHOLDER",
    "DiagnosticFormat",
    "DiagnosticLine",
    "FlashOutcome",
    "classify_outcome",
    "instantiate_args",
    "match_diagnostic",
    "render_path",
]
