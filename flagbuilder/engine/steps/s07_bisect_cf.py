"""Step 07: Bisect CF at J, JK parallel to AB up to CG."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import interpolate_at_y, midpoint


@construction_step(
    index=7,
    label="JK",
    provides=["J", "K"],
    requires=["C", "F", "G"],
    description="Bisect CF at J, draw JK parallel to AB",
)
def bisect_cf(ctx: ConstructionContext) -> None:
    c = ctx.point("C")
    j = ctx.set_point("J", midpoint(c, ctx.point("F")))
    k = ctx.set_point("K", interpolate_at_y(c, ctx.point("G"), j.y))
    ctx.add_point_marker("J")
    ctx.add_line(j, k, "JK", dashed=True)
