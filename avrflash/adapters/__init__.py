"""Adapters for the external tools avrflash drives."""

from .cargo_adapter import CargoAdapter, create_cargo_adapter
from .programmer_adapter import ProgrammerAdapter, create_programmer_adapter


__all__ = [
    "CargoAdapter",
    "ProgrammerAdapter",
    "create_cargo_adapter",
    "create_programmer_adapter",
]
