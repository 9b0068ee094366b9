"""Flash domain models."""

from pydantic import Field, model_validator

from avrflash.models.base import FrozenModel


class FlashOutcome(FrozenModel):
    """Classified result of one programmer invocation.

    A failed outcome always carries at least one reported line.
    """

    success: bool
    reported_lines: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_lines(self) -> "FlashOutcome":
        if self.success and self.reported_lines:
            raise ValueError("a successful outcome carries no reported lines")
        if not self.success and not self.reported_lines:
            raise ValueError("a failed outcome needs at least one reported line")
        return self

    @classmethod
    def succeeded(cls) -> "FlashOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, reported_lines: list[str]) -> "FlashOutcome":
        return cls(success=False, reported_lines=reported_lines)
