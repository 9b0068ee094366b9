"""Cargo adapter for build and metadata operations."""

import json
import logging
import shlex
import subprocess

from pydantic import ValidationError

from avrflash.config.models import CargoMetadata
from avrflash.core.errors import MetadataError, SpawnError
from avrflash.protocols.cargo_adapter_protocol import BuildOutput
from avrflash.utils import stream_process
from avrflash.utils.stream_process import OutputMiddleware


logger = logging.getLogger(__name__)

MESSAGE_FORMAT_OPTION = "--message-format=json"


class CargoAdapter:
    """Implementation of the cargo adapter."""

    def __init__(
        self,
        cargo: str = "cargo",
        middleware: OutputMiddleware[str] | None = None,
    ) -> None:
        self.cargo = cargo
        self.middleware = middleware or stream_process.PassthroughStderrMiddleware()

    def build(self, options: list[str]) -> BuildOutput:
        """Run `cargo build` and capture its JSON messages.

        cargo's stderr is forwarded to the terminal as it arrives.
        """
        build_cmd = [self.cargo, "build", *options, MESSAGE_FORMAT_OPTION]
        logger.debug("Cargo command: %s", " ".join(shlex.quote(arg) for arg in build_cmd))

        try:
            return_code, stdout_lines, _ = stream_process.run_command(
                build_cmd, self.middleware
            )
        except OSError as e:
            raise SpawnError(self.cargo, str(e)) from e

        logger.debug(
            "Cargo build exited with %d (%d stdout lines)",
            return_code,
            len(stdout_lines),
        )
        return return_code, stdout_lines

    def metadata(self) -> CargoMetadata:
        """Run `cargo metadata` and parse the result."""
        metadata_cmd = [self.cargo, "metadata", "--format-version", "1"]
        logger.debug("Cargo command: %s", " ".join(metadata_cmd))

        try:
            result = subprocess.run(
                metadata_cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise SpawnError(self.cargo, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.strip() or "unknown error"
            raise MetadataError(
                f"`cargo metadata` failed with exit code {result.returncode}: {stderr}",
                {"return_code": result.returncode},
            )

        try:
            return CargoMetadata.model_validate(json.loads(result.stdout))
        except (json.JSONDecodeError, ValidationError) as e:
            raise MetadataError(f"invalid `cargo metadata` output: {e}") from e


def create_cargo_adapter(
    cargo: str = "cargo",
    middleware: OutputMiddleware[str] | None = None,
) -> CargoAdapter:
    """Factory function to create a cargo adapter."""
    return CargoAdapter(cargo=cargo, middleware=middleware)
