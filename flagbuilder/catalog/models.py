"""Catalog data model: flag identity, colors and step narration."""

from __future__ import annotations

from typing import Callable, Literal

from pydantic import BaseModel, Field, PrivateAttr

from flagbuilder.engine.builder import FlagConstructionEngine
from flagbuilder.primitives import GeometryResult

StepType = Literal["line", "point", "arc", "circle", "triangle", "custom"]
FlagType = Literal["pennon", "rectangular", "triangular", "custom"]


class FlagColors(BaseModel):
    primary: str
    secondary: str
    border: str | None = None


class StepDescription(BaseModel):
    """UI narration for one construction step. The engine never reads these."""

    step: int = Field(..., ge=1)
    description: str
    type: StepType
    duration: float = Field(default=2.0, description="Suggested animation time in seconds")
    visible: bool = True


EngineFactory = Callable[[float], FlagConstructionEngine]


class FlagDefinition(BaseModel):
    """Catalog entry. Geometry comes from the engine factory attached with ``with_engine``."""

    id: str
    name: str
    country: str
    type: FlagType
    official_source: str
    adopted_date: str | None = None
    colors: FlagColors
    construction_steps: list[StepDescription] = Field(default_factory=list)

    # Not serialised: the engine is code, not catalog data
    _engine_factory: EngineFactory | None = PrivateAttr(default=None)

    @property
    def step_count(self) -> int:
        return len(self.construction_steps)

    def with_engine(self, factory: EngineFactory) -> FlagDefinition:
        self._engine_factory = factory
        return self

    def engine(self, scale: float) -> FlagConstructionEngine:
        """A fresh engine for this flag at ``scale``."""
        if self._engine_factory is None:
            raise LookupError(f"No construction engine attached to flag {self.id!r}")
        return self._engine_factory(scale)

    def build_geometry(self, scale: float) -> GeometryResult:
        return self.engine(scale).build()

    def build_up_to_step(self, scale: float, step: int) -> GeometryResult:
        return self.engine(scale).build_up_to_step(step)
