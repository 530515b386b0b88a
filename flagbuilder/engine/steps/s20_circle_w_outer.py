"""Step 20: W = UV x HI, circle centre W radius MN."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import distance


@construction_step(
    index=20,
    label="W-outer-circle",
    provides=["W"],
    requires=["H", "U", "M", "N"],
    description="Centre W, radius MN, draw circle",
)
def circle_w_outer(ctx: ConstructionContext) -> None:
    w = ctx.set_point("W", Point(ctx.point("H").x, ctx.point("U").y))
    ctx.add_circle(w, distance(ctx.point("M"), ctx.point("N")), "W-outer-circle")
