"""Configuration: tool settings and per-package flash templates."""

from .models import CargoMetadata, CargoPackage, FlashMetadata, ProjectConfig
from .settings import AvrflashSettings, load_settings
from .template import TemplateResolver


__all__ = [
    "AvrflashSettings",
    "CargoMetadata",
    "CargoPackage",
    "FlashMetadata",
    "ProjectConfig",
    "TemplateResolver",
    "load_settings",
]
