"""Step 21: Circle centre W, radius LN."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import distance


@construction_step(
    index=21,
    label="W-inner-circle",
    requires=["W", "L", "N"],
    description="Centre W, radius LN, draw circle",
)
def circle_w_inner(ctx: ConstructionContext) -> None:
    ctx.add_circle(ctx.point("W"), distance(ctx.point("L"), ctx.point("N")), "W-inner-circle")
