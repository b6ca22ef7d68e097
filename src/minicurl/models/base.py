"""Base model shared by minicurl models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MiniCurlModel(BaseModel):
    """Base model with standard configuration.

    Models are immutable once built; assigning to a field raises a
    ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )
