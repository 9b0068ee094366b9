"""Exception hierarchy for avrflash.

Every fatal condition of a flash run is represented by a subclass of
AvrflashError. Inner components raise these; only the pipeline converts them
into a failed result and only the CLI turns that into an exit code.
"""

from typing import Any


class AvrflashError(Exception):
    """Base exception for all avrflash errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class BuildError(AvrflashError):
    """Raised when the cargo build itself fails."""

    def __init__(self, message: str, return_code: int | None = None) -> None:
        super().__init__(message, {"return_code": return_code})
        self.return_code = return_code


class SelectionError(AvrflashError):
    """Raised when no single binary can be chosen from the build artifacts."""


class AmbiguousBinaryError(SelectionError):
    """Raised when the build produced more than one executable."""

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            "cargo generated more than one binary. Please specify one with "
            f"`--bin <name>`. Generated binaries: {', '.join(self.names)}",
            {"binaries": self.names},
        )


class ConfigError(AvrflashError):
    """Raised for configuration and project metadata problems."""


class MetadataError(ConfigError):
    """Raised when cargo metadata cannot be obtained or parsed."""


class MissingTemplateConfigError(ConfigError):
    """Raised when a package has no programmer argument template."""

    def __init__(self, key_path: str, manifest_path: str) -> None:
        super().__init__(
            f"please provide a `{key_path}` in {manifest_path}",
            {"key_path": key_path, "manifest_path": manifest_path},
        )
        self.key_path = key_path
        self.manifest_path = manifest_path


class MalformedTemplateConfigError(ConfigError):
    """Raised when the programmer argument template has the wrong shape."""


class FlashError(AvrflashError):
    """Raised for failures while invoking the device programmer."""


class SpawnError(FlashError):
    """Raised when an external executable cannot be started."""

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(
            f"failed to run `{executable}`: {reason}",
            {"executable": executable},
        )
        self.executable = executable


class ProgrammerInvocationError(FlashError):
    """Raised when the programmer exits with a failure status."""

    def __init__(self, reported_lines: list[str], return_code: int) -> None:
        self.reported_lines = list(reported_lines)
        self.return_code = return_code
        super().__init__(
            "; ".join(self.reported_lines),
            {"return_code": return_code, "reported_lines": self.reported_lines},
        )


__all__ = [
    "AmbiguousBinaryError",
    "AvrflashError",
    "BuildError",
    "ConfigError",
    "FlashError",
    "MalformedTemplateConfigError",
    "MetadataError",
    "MissingTemplateConfigError",
    "ProgrammerInvocationError",
    "SelectionError",
    "SpawnError",
]
