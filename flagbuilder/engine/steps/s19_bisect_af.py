"""Step 19: Bisect AF at U, UV parallel to AB up to BE."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import interpolate_at_y, midpoint


@construction_step(
    index=19,
    label="UV",
    provides=["U", "V"],
    requires=["A", "F", "B", "E"],
    description="Bisect AF at U, draw UV parallel to AB",
)
def bisect_af(ctx: ConstructionContext) -> None:
    u = ctx.set_point("U", midpoint(ctx.point("A"), ctx.point("F")))
    v = ctx.set_point("V", interpolate_at_y(ctx.point("B"), ctx.point("E"), u.y))
    ctx.add_point_marker("U")
    ctx.add_line(u, v, "UV", dashed=True)
