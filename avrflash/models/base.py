"""Base model for all avrflash Pydantic models.

This module provides a base model class that enforces consistent validation
behavior across all avrflash models.
"""

from pydantic import BaseModel, ConfigDict


class AvrflashBaseModel(BaseModel):
    """Base model class for all avrflash Pydantic models."""

    model_config = ConfigDict(
        # Strip whitespace from string fields
        str_strip_whitespace=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )


class FrozenModel(AvrflashBaseModel):
    """Immutable base model for values that never change after construction."""

    model_config = ConfigDict(
        str_strip_whitespace=False,
        frozen=True,
    )
