"""ConstructionContext: the single mutable state object flowing through all steps.

Named points → ConstructionContext.points
Renderable artifacts → ConstructionContext.records (append-only)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flagbuilder.engine.config import HEIGHT_RATIO, ConstructionConfig
from flagbuilder.primitives import ConstructionRecord, DecorationKind, Point, RecordKind
from flagbuilder.utils.geometry import sample_arc, sample_circle, sample_line


class MissingPointError(KeyError):
    """A step asked for a named point that no earlier step derived."""


@dataclass
class ConstructionContext:
    """Shared state for one build. Discarded once the result is assembled."""

    # Length of AB in construction units
    unit: float = 100.0
    config: ConstructionConfig = field(default_factory=ConstructionConfig)

    points: dict[str, Point] = field(default_factory=dict)
    records: list[ConstructionRecord] = field(default_factory=list)
    # Decorations unlocked by their finishing steps (18: moon, 22: sun)
    eligible_decorations: set[DecorationKind] = field(default_factory=set)

    # --- Build metadata ---
    current_step: int = 0
    completed_steps: list[int] = field(default_factory=list)
    errors: dict[int, str] = field(default_factory=dict)

    @property
    def height(self) -> float:
        return self.unit * HEIGHT_RATIO

    @property
    def last_completed(self) -> int:
        return self.completed_steps[-1] if self.completed_steps else 0

    def has(self, label: str) -> bool:
        return label in self.points

    def point(self, label: str) -> Point:
        try:
            return self.points[label]
        except KeyError:
            raise MissingPointError(label) from None

    def set_point(self, label: str, p: Point) -> Point:
        self.points[label] = p
        return p

    # --- Record emitters ---

    def _append(self, kind: RecordKind, points: tuple[Point, ...], label: str,
                color: str, dashed: bool) -> ConstructionRecord:
        record = ConstructionRecord(
            kind=kind,
            points=points,
            label=label,
            color=color,
            dashed=dashed,
            step=self.current_step,
        )
        self.records.append(record)
        return record

    def add_line(self, p1: Point, p2: Point, label: str, dashed: bool = False) -> ConstructionRecord:
        pts = sample_line(p1, p2, self.config.line_segments)
        return self._append(RecordKind.LINE, pts, label, self.config.line_color, dashed)

    def add_point_marker(self, label: str) -> ConstructionRecord:
        return self._append(
            RecordKind.POINT, (self.point(label),), label, self.config.marker_color, False
        )

    def add_arc(self, center: Point, radius: float, start: float, end: float,
                label: str, dashed: bool = True) -> ConstructionRecord:
        pts = sample_arc(center, radius, start, end, self.config.arc_segments)
        return self._append(RecordKind.ARC, pts, label, self.config.line_color, dashed)

    def add_circle(self, center: Point, radius: float, label: str,
                   dashed: bool = True) -> ConstructionRecord:
        pts = sample_circle(center, radius, self.config.circle_segments)
        return self._append(RecordKind.CIRCLE, pts, label, self.config.line_color, dashed)
