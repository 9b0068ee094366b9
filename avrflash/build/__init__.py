"""Build output decoding and binary selection."""

from .events import decode_message, iter_candidates, iter_messages
from .models import CandidateArtifact, CompilerArtifact
from .selector import select_binary


__all__ = [
    "CandidateArtifact",
    "CompilerArtifact",
    "decode_message",
    "iter_candidates",
    "iter_messages",
    "select_binary",
]
