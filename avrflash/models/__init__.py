"""Shared models for avrflash."""

from .base import AvrflashBaseModel, FrozenModel
from .results import BaseResult


__all__ = ["AvrflashBaseModel", "BaseResult", "FrozenModel"]
