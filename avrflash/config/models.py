"""Models for cargo metadata and per-package flash configuration."""

from typing import Any

from pydantic import ConfigDict, Field

from avrflash.models.base import FrozenModel


class CargoPackage(FrozenModel):
    """A package entry from `cargo metadata`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    manifest_path: str
    metadata: Any = None


class CargoMetadata(FrozenModel):
    """The parts of the `cargo metadata --format-version 1` document we use."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    packages: list[CargoPackage] = Field(default_factory=list)

    def find_package(self, package_id: str) -> CargoPackage | None:
        """Return the package with the given id, if present."""
        for package in self.packages:
            if package.id == package_id:
                return package
        return None


class FlashMetadata(FrozenModel):
    """Shape of `package.metadata.<key>` in Cargo.toml.

    Unknown keys are rejected so typos surface instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    args: list[str]


class ProjectConfig(FrozenModel):
    """Resolved programmer configuration of one package."""

    package_id: str
    manifest_path: str
    argument_template: list[str]
