"""Process execution and streaming output handling.

This module runs subprocesses and hands every output line to a middleware
object, which decides whether the line is shown, captured, or dropped.

Example:
    ```python
    from avrflash.utils.stream_process import run_command, CaptureOutputMiddleware

    return_code, stdout, stderr = run_command(
        ["avrdude", "-?"], middleware=CaptureOutputMiddleware(capture_stdout=False)
    )
    ```
"""

import shlex
import subprocess
import sys
from threading import Thread
from typing import IO, Generic, TypeAlias, TypeVar


T = TypeVar("T")  # Type of processed output

# Type alias for the result of run_command
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]  # (return_code, stdout, stderr)


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Type parameter T represents the return type of the process method.
    Returning None from process() drops the line from the captured output.
    """

    def process(self, line: str, stream_type: str) -> T | None:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output
            stream_type: Either "stdout" or "stderr"

        Returns:
            Processed output of type T, or None to drop the line
        """
        raise NotImplementedError()


class CaptureOutputMiddleware(OutputMiddleware[str]):
    """Silently captures the selected streams."""

    def __init__(self, capture_stdout: bool = True, capture_stderr: bool = True) -> None:
        self.capture_stdout = capture_stdout
        self.capture_stderr = capture_stderr

    def process(self, line: str, stream_type: str) -> str | None:
        if stream_type == "stdout":
            return line if self.capture_stdout else None
        return line if self.capture_stderr else None


class PassthroughStderrMiddleware(OutputMiddleware[str]):
    """Captures stdout and forwards stderr to our own stderr as it arrives.

    Used for the build step: cargo's human readable progress goes to the
    terminal while its machine readable stdout is kept for decoding.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream

    def process(self, line: str, stream_type: str) -> str | None:
        if stream_type == "stdout":
            return line
        stream = self.stream or sys.stderr
        stream.write(f"{line}\n")
        stream.flush()
        return None


def run_command(
    cmd: str | list[str],
    middleware: OutputMiddleware[T],
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    The process gets no stdin. Output is decoded as UTF-8 with undecodable
    bytes replaced, so unusual tool output never aborts a run. Pipes are
    closed and the process reaped on every exit path.

    Args:
        cmd: Command to run, either as a string or list of arguments
        middleware: Middleware deciding what happens to each output line

    Returns:
        Tuple of return code, processed stdout lines and processed stderr lines

    Raises:
        OSError: If the executable cannot be started
    """
    if isinstance(cmd, str):
        cmd = shlex.split(cmd)

    def stream_output(stream: IO[str], stream_type: str, captured: list[T]) -> None:
        for line in iter(stream.readline, ""):
            processed = middleware.process(line.rstrip("\r\n"), stream_type)
            if processed is not None:
                captured.append(processed)

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    with subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        bufsize=1,
    ) as process:
        assert process.stdout is not None and process.stderr is not None

        stdout_thread = Thread(
            target=stream_output, args=(process.stdout, "stdout", stdout_lines)
        )
        stderr_thread = Thread(
            target=stream_output, args=(process.stderr, "stderr", stderr_lines)
        )
        stdout_thread.daemon = True
        stderr_thread.daemon = True

        stdout_thread.start()
        stderr_thread.start()

        # Drain output before waiting so a chatty process cannot fill a pipe
        stdout_thread.join()
        stderr_thread.join()

        return_code = process.wait()

    return return_code, stdout_lines, stderr_lines
