"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from flagbuilder.config import settings


class GeometryRequest(BaseModel):
    flag_id: str = Field(default="nepal", description="Catalog id of the flag")
    scale: float = Field(
        default_factory=lambda: settings.default_scale,
        gt=0,
        description="Length of AB in construction units",
    )
    step: int | None = Field(
        default=None,
        description="Build through this step (clamped to the engine's range); omit for the full flag",
    )
