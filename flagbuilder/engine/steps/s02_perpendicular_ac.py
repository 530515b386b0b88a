"""Step 02: Perpendicular AC = AB + 1/3 AB."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=2,
    label="AC",
    provides=["C"],
    requires=["A"],
    description="Draw AC perpendicular to AB, AC = AB + 1/3 AB",
)
def perpendicular_ac(ctx: ConstructionContext) -> None:
    c = ctx.set_point("C", Point(0.0, ctx.height))
    ctx.add_line(ctx.point("A"), c, "AC")
