"""Step 05: FG parallel to AB through E, FG = AB."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=5,
    label="FG",
    provides=["F", "G"],
    requires=["E"],
    description="Draw line FG parallel to AB, FG = AB",
)
def parallel_fg(ctx: ConstructionContext) -> None:
    y = ctx.point("E").y
    f = ctx.set_point("F", Point(0.0, y))
    g = ctx.set_point("G", Point(ctx.unit, y))
    ctx.add_line(f, g, "FG")
