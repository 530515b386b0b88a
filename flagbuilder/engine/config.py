"""Construction configuration: sampling densities and drawing colors."""

from __future__ import annotations

from dataclasses import dataclass

# Geometry-producing steps. Steps 23-24 (border, completion) are catalog-only.
STEP_COUNT = 22

# AC = AB + 1/3 AB. Fixes the flag's aspect ratio.
HEIGHT_RATIO = 4 / 3


@dataclass(frozen=True)
class ConstructionConfig:
    """Fixed per-kind segment counts keep every build deterministic."""

    line_segments: int = 2
    arc_segments: int = 30
    circle_segments: int = 40

    # Denominator threshold below which two lines count as parallel
    parallel_epsilon: float = 1e-10

    line_color: str = "#666"
    marker_color: str = "#f00"
    decoration_color: str = "#FFFFFF"

    # Decoration size as a fraction of AB
    moon_scale_ratio: float = 1 / 8
    sun_scale_ratio: float = 1 / 6
