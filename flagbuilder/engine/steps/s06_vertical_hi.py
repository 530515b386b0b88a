"""Step 06: AH = 1/4 AB, HI parallel to AC up to CG."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import interpolate_at_x


@construction_step(
    index=6,
    label="HI",
    provides=["H", "I"],
    requires=["C", "G"],
    description="Mark AH = 1/4 AB, draw HI parallel to AC",
)
def vertical_hi(ctx: ConstructionContext) -> None:
    h = ctx.set_point("H", Point(ctx.unit / 4, 0.0))
    # HI is vertical, so I is CG evaluated at x = H.x
    i = ctx.set_point("I", interpolate_at_x(ctx.point("C"), ctx.point("G"), h.x))
    ctx.add_point_marker("H")
    ctx.add_line(h, i, "HI", dashed=True)
