"""Selection of the single binary to flash."""

from collections.abc import Iterable

from avrflash.build.models import CandidateArtifact
from avrflash.core.errors import AmbiguousBinaryError
from avrflash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


def select_binary(candidates: Iterable[CandidateArtifact]) -> CandidateArtifact | None:
    """Pick the one executable produced by the build.

    Returns:
        The only candidate, or None when the build produced no executable

    Raises:
        AmbiguousBinaryError: If more than one executable was produced
    """
    collected = list(candidates)
    logger.debug("binary_candidates_collected", count=len(collected))

    if not collected:
        return None
    if len(collected) > 1:
        raise AmbiguousBinaryError([candidate.name for candidate in collected])
    return collected[0]
