"""Resolution of the per-package programmer argument template."""

from collections.abc import Mapping

from pydantic import ValidationError

from avrflash.config.models import CargoMetadata, FlashMetadata, ProjectConfig
from avrflash.core.errors import (
    ConfigError,
    MalformedTemplateConfigError,
    MissingTemplateConfigError,
)
from avrflash.core.structlog_logger import get_struct_logger
from avrflash.protocols.cargo_adapter_protocol import MetadataProviderProtocol


logger = get_struct_logger(__name__)

DEFAULT_METADATA_KEY = "avrflash"


class TemplateResolver:
    """Looks up `package.metadata.<key>.args` for a cargo package.

    The metadata document is fetched lazily on first use and reused for the
    lifetime of the resolver.
    """

    def __init__(
        self,
        metadata_provider: MetadataProviderProtocol,
        metadata_key: str = DEFAULT_METADATA_KEY,
    ) -> None:
        self.metadata_provider = metadata_provider
        self.metadata_key = metadata_key
        self._metadata: CargoMetadata | None = None

    @property
    def key_path(self) -> str:
        return f"package.metadata.{self.metadata_key}.args"

    def get_metadata(self) -> CargoMetadata:
        if self._metadata is None:
            self._metadata = self.metadata_provider.metadata()
        return self._metadata

    def resolve(self, package_id: str) -> ProjectConfig:
        """Resolve the argument template of the package with ``package_id``.

        Raises:
            ConfigError: If the package is not part of the cargo metadata
            MissingTemplateConfigError: If the package has no template
            MalformedTemplateConfigError: If the template has the wrong shape
        """
        package = self.get_metadata().find_package(package_id)
        if package is None:
            raise ConfigError(
                f"couldn't find package {package_id} in cargo metadata",
                {"package_id": package_id},
            )

        metadata = package.metadata
        if not isinstance(metadata, Mapping) or self.metadata_key not in metadata:
            raise MissingTemplateConfigError(self.key_path, package.manifest_path)

        try:
            flash_metadata = FlashMetadata.model_validate(metadata[self.metadata_key])
        except ValidationError as e:
            raise MalformedTemplateConfigError(
                f"invalid `package.metadata.{self.metadata_key}` structure: {e}",
                {"package_id": package_id, "manifest_path": package.manifest_path},
            ) from e

        logger.debug(
            "argument_template_resolved",
            package=package.name,
            argument_count=len(flash_metadata.args),
        )
        return ProjectConfig(
            package_id=package_id,
            manifest_path=package.manifest_path,
            argument_template=flash_metadata.args,
        )
