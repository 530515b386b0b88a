"""Step 03: D on AC with AD = AB, then join BD."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=3,
    label="BD",
    provides=["D"],
    requires=["B"],
    description="Mark D on AC where AD = AB, join B and D",
)
def diagonal_bd(ctx: ConstructionContext) -> None:
    d = ctx.set_point("D", Point(0.0, ctx.unit))
    ctx.add_point_marker("D")
    ctx.add_line(ctx.point("B"), d, "BD")
