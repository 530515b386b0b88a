"""Step 12: OM parallel to AB.

OM's height is the flat edge of the semicircles drawn in steps 13-14.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=12,
    label="OM",
    provides=["O"],
    requires=["M"],
    description="Draw line OM parallel to AB",
)
def parallel_om(ctx: ConstructionContext) -> None:
    m = ctx.point("M")
    o = ctx.set_point("O", Point(0.0, m.y))
    ctx.add_point_marker("O")
    ctx.add_line(o, Point(m.x + ctx.unit / 2, m.y), "OM", dashed=True)
