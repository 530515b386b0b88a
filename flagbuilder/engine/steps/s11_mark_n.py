"""Step 11: N on HI below M, at M's shortest distance to BD."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import point_line_distance


@construction_step(
    index=11,
    label="N",
    provides=["N"],
    requires=["M", "B", "D"],
    description="With centre M, mark N on HI",
)
def mark_n(ctx: ConstructionContext) -> None:
    m = ctx.point("M")
    dist = point_line_distance(m, ctx.point("B"), ctx.point("D"))
    ctx.set_point("N", Point(m.x, m.y - dist))
    ctx.add_point_marker("N")
