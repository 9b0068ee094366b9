from .errors import (
    AmbiguousBinaryError,
    AvrflashError,
    BuildError,
    ConfigError,
    FlashError,
    MalformedTemplateConfigError,
    MetadataError,
    MissingTemplateConfigError,
    ProgrammerInvocationError,
    SelectionError,
    SpawnError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "AvrflashError",
    "BuildError",
    "SelectionError",
    "AmbiguousBinaryError",
    "ConfigError",
    "MetadataError",
    "MissingTemplateConfigError",
    "MalformedTemplateConfigError",
    "FlashError",
    "SpawnError",
    "ProgrammerInvocationError",
]
