"""Adapter for running the device programmer."""

import logging
import shlex

from avrflash.core.errors import SpawnError
from avrflash.protocols.programmer_adapter_protocol import ProgrammerResult
from avrflash.utils import stream_process


logger = logging.getLogger(__name__)


class ProgrammerAdapter:
    """Runs the programmer executable, keeping only its stderr."""

    def __init__(self, executable: str = "avrdude") -> None:
        self.executable = executable

    def run(self, args: list[str]) -> ProgrammerResult:
        programmer_cmd = [self.executable, *args]
        logger.debug(
            "Programmer command: %s",
            " ".join(shlex.quote(arg) for arg in programmer_cmd),
        )

        try:
            return_code, _, stderr_lines = stream_process.run_command(
                programmer_cmd,
                stream_process.CaptureOutputMiddleware(capture_stdout=False),
            )
        except OSError as e:
            raise SpawnError(self.executable, str(e)) from e

        logger.debug(
            "Programmer exited with %d (%d stderr lines)",
            return_code,
            len(stderr_lines),
        )
        return return_code, stderr_lines


def create_programmer_adapter(executable: str = "avrdude") -> ProgrammerAdapter:
    """Factory function to create a programmer adapter."""
    return ProgrammerAdapter(executable=executable)
