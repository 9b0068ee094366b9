"""Protocol definition for device programmer invocation."""

from typing import Protocol, TypeAlias, runtime_checkable


ProgrammerResult: TypeAlias = tuple[int, list[str]]  # (return_code, stderr_lines)


@runtime_checkable
class ProgrammerAdapterProtocol(Protocol):
    """Protocol for running the device programmer."""

    def run(self, args: list[str]) -> ProgrammerResult:
        """Run the programmer with the given arguments.

        The programmer's stdout is discarded and no stdin is supplied.

        Returns:
            Tuple containing (return_code, stderr_lines)

        Raises:
            SpawnError: If the programmer cannot be started
        """
        ...
