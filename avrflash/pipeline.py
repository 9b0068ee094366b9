"""Build-and-flash pipeline.

Runs the stages strictly in order:

    BUILDING -> ARTIFACTS_COLLECTED -> NO_BINARY | AMBIGUOUS_BINARY | ONE_BINARY
    -> TEMPLATE_RESOLVED -> ARGS_INSTANTIATED -> INVOKING -> DONE

Any fatal error moves the run to FAILED (or AMBIGUOUS_BINARY). The stages
raise AvrflashError subclasses; ``FlashPipeline.run`` is the only place they
are turned into a failed result, and the CLI is the only place a result
becomes an exit code.
"""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import ConfigDict, Field

from avrflash.adapters.cargo_adapter import create_cargo_adapter
from avrflash.adapters.programmer_adapter import create_programmer_adapter
from avrflash.build.events import iter_candidates
from avrflash.build.models import CandidateArtifact
from avrflash.build.selector import select_binary
from avrflash.config.settings import AvrflashSettings
from avrflash.config.template import TemplateResolver
from avrflash.core.errors import (
    AmbiguousBinaryError,
    AvrflashError,
    BuildError,
    ProgrammerInvocationError,
)
from avrflash.core.structlog_logger import get_struct_logger, log_error_with_context
from avrflash.flash.arguments import instantiate_args
from avrflash.flash.diagnostics import DiagnosticFormat, classify_outcome
from avrflash.flash.models import FlashOutcome
from avrflash.models.results import BaseResult
from avrflash.protocols import CargoAdapterProtocol, ProgrammerAdapterProtocol


logger = get_struct_logger(__name__)

NO_BINARY_MESSAGE = "cargo did not generate a binary. Nothing else to do"


class PipelineState(str, Enum):
    """States of a flash run."""

    BUILDING = "building"
    ARTIFACTS_COLLECTED = "artifacts_collected"
    NO_BINARY = "no_binary"
    AMBIGUOUS_BINARY = "ambiguous_binary"
    ONE_BINARY = "one_binary"
    TEMPLATE_RESOLVED = "template_resolved"
    ARGS_INSTANTIATED = "args_instantiated"
    INVOKING = "invoking"
    DONE = "done"
    FAILED = "failed"


class PipelineResult(BaseResult):
    """Result of a build-and-flash run."""

    # Programmer arguments must reach the tool exactly as configured
    model_config = ConfigDict(str_strip_whitespace=False)

    state: PipelineState = PipelineState.BUILDING
    binary_name: str | None = None
    binary_path: Path | None = None
    args: list[str] = Field(default_factory=list)
    outcome: FlashOutcome | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.is_success() else 1

    @property
    def flashed(self) -> bool:
        return self.outcome is not None and self.outcome.success


# Progress callback: (label, detail), e.g. ("Flashing", "/path/to/blink.elf")
ProgressCallback = Callable[[str, str], None]


class FlashPipeline:
    """Builds a cargo project and flashes the resulting binary."""

    def __init__(
        self,
        cargo_adapter: CargoAdapterProtocol,
        programmer_adapter: ProgrammerAdapterProtocol,
        settings: AvrflashSettings | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.settings = settings or AvrflashSettings()
        self.cargo_adapter = cargo_adapter
        self.programmer_adapter = programmer_adapter
        self.template_resolver = TemplateResolver(
            cargo_adapter, metadata_key=self.settings.metadata_key
        )
        self.diagnostic_format = DiagnosticFormat(
            tool=self.settings.effective_diagnostic_tool
        )
        self.on_progress = on_progress

    def run(self, cargo_options: list[str]) -> PipelineResult:
        """Run the whole pipeline; never raises AvrflashError.

        Errors are only logged at debug level; the returned result carries
        them for the caller to report.
        """
        result = PipelineResult(success=True)

        try:
            self._run(cargo_options, result)
        except AmbiguousBinaryError as e:
            log_error_with_context(logger, "ambiguous_binary", e, level=logging.DEBUG)
            self._transition(result, PipelineState.AMBIGUOUS_BINARY)
            result.add_error(str(e))
        except ProgrammerInvocationError as e:
            log_error_with_context(logger, "programmer_failed", e, level=logging.DEBUG)
            self._transition(result, PipelineState.DONE)
            result.errors.extend(e.reported_lines)
            result.success = False
        except AvrflashError as e:
            log_error_with_context(
                logger,
                "flash_run_failed",
                e,
                level=logging.DEBUG,
                state=result.state,
            )
            self._transition(result, PipelineState.FAILED)
            result.add_error(str(e))

        return result

    def _run(self, cargo_options: list[str], result: PipelineResult) -> None:
        self._transition(result, PipelineState.BUILDING)
        return_code, stdout_lines = self.cargo_adapter.build(cargo_options)
        if return_code != 0:
            raise BuildError(
                f"cargo build failed with exit code {return_code}", return_code
            )

        binary = select_binary(iter_candidates(stdout_lines))
        self._transition(result, PipelineState.ARTIFACTS_COLLECTED)

        if binary is None:
            self._transition(result, PipelineState.NO_BINARY)
            result.add_message(NO_BINARY_MESSAGE)
            return

        self._transition(result, PipelineState.ONE_BINARY)
        result.binary_name = binary.name
        result.binary_path = binary.path

        self.flash(binary, result)

    def flash(self, binary: CandidateArtifact, result: PipelineResult) -> FlashOutcome:
        """Resolve, bind and run the programmer for ``binary``.

        Raises:
            ProgrammerInvocationError: If the programmer reports a failure
        """
        project_config = self.template_resolver.resolve(binary.package_id)
        self._transition(result, PipelineState.TEMPLATE_RESOLVED)

        args = instantiate_args(project_config.argument_template, binary.path)
        result.args = args
        self._transition(result, PipelineState.ARGS_INSTANTIATED)

        self._progress("Flashing", str(binary.path))
        self._transition(result, PipelineState.INVOKING)
        return_code, stderr_lines = self.programmer_adapter.run(args)

        outcome = classify_outcome(return_code, stderr_lines, self.diagnostic_format)
        result.outcome = outcome
        if not outcome.success:
            raise ProgrammerInvocationError(outcome.reported_lines, return_code)

        self._transition(result, PipelineState.DONE)
        self._progress("Flashed", str(binary.path))
        result.add_message(f"Flashed {binary.path}")
        return outcome

    def _transition(self, result: PipelineResult, state: PipelineState) -> None:
        logger.debug("pipeline_state", previous=result.state, state=state.value)
        result.state = state

    def _progress(self, label: str, detail: str) -> None:
        if self.on_progress is not None:
            self.on_progress(label, detail)


def create_flash_pipeline(
    settings: AvrflashSettings | None = None,
    on_progress: ProgressCallback | None = None,
) -> FlashPipeline:
    """Factory function to create a pipeline wired to the real tools."""
    settings = settings or AvrflashSettings()
    return FlashPipeline(
        cargo_adapter=create_cargo_adapter(cargo=settings.cargo),
        programmer_adapter=create_programmer_adapter(executable=settings.programmer),
        settings=settings,
        on_progress=on_progress,
    )
