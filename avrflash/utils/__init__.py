"""Utility modules for avrflash."""

from avrflash.utils.stream_process import (
    CaptureOutputMiddleware,
    OutputMiddleware,
    PassthroughStderrMiddleware,
    ProcessResult,
    run_command,
)


__all__ = [
    "CaptureOutputMiddleware",
    "OutputMiddleware",
    "PassthroughStderrMiddleware",
    "ProcessResult",
    "run_command",
]
