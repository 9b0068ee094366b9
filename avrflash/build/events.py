"""Decoding of cargo's JSON message stream."""

import json
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from avrflash.build.models import CandidateArtifact, CompilerArtifact
from avrflash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

COMPILER_ARTIFACT_REASON = "compiler-artifact"


def decode_message(line: str) -> CompilerArtifact | None:
    """Decode one line of cargo output.

    Returns:
        The artifact record, or None for any other or malformed line
    """
    if not line.strip():
        return None

    try:
        record = json.loads(line)
    except json.JSONDecodeError:
        logger.debug("skipping_non_json_line", line=line[:200])
        return None

    if not isinstance(record, dict) or record.get("reason") != COMPILER_ARTIFACT_REASON:
        return None

    try:
        return CompilerArtifact.model_validate(record)
    except ValidationError as e:
        logger.debug("skipping_malformed_artifact", error=str(e))
        return None


def iter_messages(lines: Iterable[str]) -> Iterator[CompilerArtifact]:
    """Lazily yield the compiler-artifact records found in ``lines``."""
    for line in lines:
        message = decode_message(line)
        if message is not None:
            yield message


def iter_candidates(lines: Iterable[str]) -> Iterator[CandidateArtifact]:
    """Lazily yield a candidate for every executable artifact in ``lines``.

    Libraries, build scripts and other artifacts without an executable are
    skipped.
    """
    for artifact in iter_messages(lines):
        if artifact.executable is None:
            continue
        logger.debug(
            "executable_artifact_found",
            name=artifact.target.name,
            path=str(artifact.executable),
        )
        yield CandidateArtifact(
            name=artifact.target.name,
            package_id=artifact.package_id,
            path=artifact.executable,
        )
