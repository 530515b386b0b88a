"""Value types shared by the construction engine, the renderer and the API layer.

All coordinates are in construction units with y pointing up; one flag unit
(the length of AB) equals the engine's scale.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class RecordKind(str, enum.Enum):
    LINE = "line"
    POINT = "point"
    ARC = "arc"
    CIRCLE = "circle"


@dataclass(frozen=True)
class ConstructionRecord:
    """A renderable artifact emitted by one construction step."""

    kind: RecordKind
    # Sampled polyline, in drawing order
    points: tuple[Point, ...]
    label: str = ""
    color: str = "#666"
    dashed: bool = False
    # Index of the step that emitted this record
    step: int = 0


class DecorationKind(str, enum.Enum):
    MOON = "moon"
    SUN = "sun"


@dataclass(frozen=True)
class MoonParams:
    rays: int = 8


@dataclass(frozen=True)
class SunParams:
    rays: int = 12


DecorationParams = MoonParams | SunParams


@dataclass(frozen=True)
class Decoration:
    """Symbolic overlay anchored on a named construction point.

    The engine only decides where a decoration sits and how big it is; the
    cusp/ray geometry belongs to whoever draws it.
    """

    kind: DecorationKind
    position: Point
    scale: float
    color: str
    params: DecorationParams
    z: float = 0.1


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float


@dataclass
class GeometryResult:
    """Output of a single build. Owned by the caller."""

    outline: list[Point]
    decorations: list[Decoration]
    dimensions: Dimensions
    construction_lines: list[ConstructionRecord]
    # Named points derived so far, keyed by label
    points: dict[str, Point] = field(default_factory=dict)
    completed_step: int = 0
    errors: dict[int, str] = field(default_factory=dict)

    def decorations_of(self, kind: DecorationKind) -> list[Decoration]:
        return [d for d in self.decorations if d.kind == kind]
