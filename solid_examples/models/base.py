"""Base models for the SOLID examples."""

from pydantic import BaseModel, ConfigDict


class SolidBaseModel(BaseModel):
    """Base model for all mutable models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


class ValueModel(SolidBaseModel):
    """Base model for immutable values and variants."""

    model_config = ConfigDict(frozen=True)


__all__ = ["SolidBaseModel", "ValueModel"]
