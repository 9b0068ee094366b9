"""avrflash - build a cargo binary and flash it with avrdude."""

from importlib.metadata import distribution

from .build.models import CandidateArtifact
from .flash.models import FlashOutcome
from .pipeline import FlashPipeline, PipelineResult, PipelineState


__version__ = distribution(__package__ or "avrflash").version

__all__ = [
    "CandidateArtifact",
    "FlashOutcome",
    "FlashPipeline",
    "PipelineResult",
    "PipelineState",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
