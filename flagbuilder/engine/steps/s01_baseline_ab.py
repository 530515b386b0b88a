"""Step 01: Baseline AB.

Horizontal segment of length AB starting at the origin. Every later length
is derived from this one.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point


@construction_step(
    index=1,
    label="AB",
    provides=["A", "B"],
    description="Draw line AB from left to right",
)
def baseline_ab(ctx: ConstructionContext) -> None:
    a = ctx.set_point("A", Point(0.0, 0.0))
    b = ctx.set_point("B", Point(ctx.unit, 0.0))
    ctx.add_line(a, b, "AB")
