"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from flagbuilder.catalog.models import FlagColors


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    steps_registered: int = 0


class PointModel(BaseModel):
    x: float
    y: float


class ConstructionRecordModel(BaseModel):
    type: str
    points: list[PointModel] = Field(default_factory=list)
    label: str = ""
    color: str = "#666"
    dashed: bool = False
    step: int = 0


class DecorationModel(BaseModel):
    type: str
    position: PointModel
    z: float = 0.1
    scale: float
    color: str
    rays: int


class DimensionsModel(BaseModel):
    width: float
    height: float


class GeometryResponse(BaseModel):
    flag_id: str
    scale: float
    requested_step: int | None = None
    completed_step: int = 0
    shape: list[PointModel] = Field(default_factory=list)
    decorations: list[DecorationModel] = Field(default_factory=list)
    dimensions: DimensionsModel
    construction_lines: list[ConstructionRecordModel] = Field(default_factory=list)
    points: dict[str, PointModel] = Field(default_factory=dict)
    errors: dict[int, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class FlagSummary(BaseModel):
    id: str
    name: str
    country: str
    type: str
    step_count: int
    colors: FlagColors
