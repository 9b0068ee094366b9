"""Protocol definitions for cargo operations."""

from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable


if TYPE_CHECKING:
    from avrflash.config.models import CargoMetadata


BuildOutput: TypeAlias = tuple[int, list[str]]  # (return_code, stdout_lines)


@runtime_checkable
class MetadataProviderProtocol(Protocol):
    """Source of the cargo metadata document."""

    def metadata(self) -> "CargoMetadata":
        """Return the workspace's cargo metadata.

        Raises:
            MetadataError: If the metadata cannot be obtained or parsed
        """
        ...


@runtime_checkable
class CargoAdapterProtocol(MetadataProviderProtocol, Protocol):
    """Protocol for cargo operations."""

    def build(self, options: list[str]) -> BuildOutput:
        """Run `cargo build` with JSON messages on stdout.

        Args:
            options: Extra options passed to `cargo build` verbatim

        Returns:
            Tuple containing (return_code, stdout_lines)

        Raises:
            SpawnError: If cargo cannot be started
        """
        ...
