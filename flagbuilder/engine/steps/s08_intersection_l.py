"""Step 08: L = JK x HI.

Both lines are axis-aligned, so L is a plain coordinate combination.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=8,
    label="L",
    provides=["L"],
    requires=["H", "J"],
    description="L is intersection of JK and HI",
)
def intersection_l(ctx: ConstructionContext) -> None:
    ctx.set_point("L", Point(ctx.point("H").x, ctx.point("J").y))
    ctx.add_point_marker("L")
