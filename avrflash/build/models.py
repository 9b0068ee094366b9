"""Models for cargo build output."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ConfigDict

from avrflash.models.base import FrozenModel


class CargoTarget(FrozenModel):
    """The target section of a compiler-artifact message."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    kind: list[str] = []


class CompilerArtifact(FrozenModel):
    """A `compiler-artifact` record from `cargo build --message-format=json`.

    Only the fields needed to pick a binary are decoded; everything else in
    the record is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    reason: Literal["compiler-artifact"]
    package_id: str
    target: CargoTarget
    executable: Path | None = None


@dataclass(frozen=True)
class CandidateArtifact:
    """An executable artifact that may be the binary to flash.

    Attributes:
        name: Name of the cargo target that produced the executable
        package_id: Cargo package id of the owning package
        path: Filesystem path of the executable
    """

    name: str
    package_id: str
    path: Path
