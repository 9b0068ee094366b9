"""Classification of the programmer's exit status and stderr.

avrdude reports problems as lines of the form::

    avrdude: error: could not open device

Only lines carrying both the tool prefix and the error prefix are reported.
Anything else is ignored, even when the tool means it as an error; this is a
best-effort text scan, not a grammar of the tool's output.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from avrflash.core.structlog_logger import get_struct_logger
from avrflash.flash.models import FlashOutcome


logger = get_struct_logger(__name__)

DEFAULT_TOOL = "avrdude"
TOOL_SEPARATOR = ": "
ERROR_PREFIX = "error: "
UNKNOWN_ERROR = "unknown error"


@dataclass(frozen=True)
class DiagnosticLine:
    """A stderr line that matched the tool's diagnostic prefixes."""

    tool: str
    severity: str
    message: str


@dataclass(frozen=True)
class DiagnosticFormat:
    """Prefix rules for one tool's diagnostics."""

    tool: str = DEFAULT_TOOL

    @property
    def tool_prefix(self) -> str:
        return f"{self.tool}{TOOL_SEPARATOR}"

    def match(self, line: str) -> DiagnosticLine | None:
        """Match an error diagnostic, returning None for any other line."""
        tool_prefix = self.tool_prefix
        if not line.startswith(tool_prefix):
            return None

        rest = line[len(tool_prefix) :]
        if not rest.startswith(ERROR_PREFIX):
            return None

        return DiagnosticLine(
            tool=self.tool,
            severity="error",
            message=rest[len(ERROR_PREFIX) :],
        )


def match_diagnostic(
    line: str, diagnostic_format: DiagnosticFormat | None = None
) -> DiagnosticLine | None:
    return (diagnostic_format or DiagnosticFormat()).match(line)


def classify_outcome(
    return_code: int,
    stderr_lines: Iterable[str],
    diagnostic_format: DiagnosticFormat | None = None,
) -> FlashOutcome:
    """Turn the programmer's exit status and stderr into a FlashOutcome.

    A zero exit status is success whatever stderr says. On failure every
    error diagnostic is reported in order; if none is found a single
    "unknown error" line is reported instead.
    """
    if return_code == 0:
        return FlashOutcome.succeeded()

    diagnostic_format = diagnostic_format or DiagnosticFormat()
    reported = [
        match.message
        for match in (diagnostic_format.match(line) for line in stderr_lines)
        if match is not None
    ]

    if not reported:
        logger.debug("no_error_diagnostics_matched", return_code=return_code)
        reported = [UNKNOWN_ERROR]

    return FlashOutcome.failed(reported)
