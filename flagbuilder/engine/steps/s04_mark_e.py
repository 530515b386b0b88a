"""Step 04: E on BD with BE = AB.

E is interpolated along BD itself, not along AC.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import distance, lerp


@construction_step(
    index=4,
    label="E",
    provides=["E"],
    requires=["B", "D"],
    description="From BD mark off E making BE equal to AB",
)
def mark_e(ctx: ConstructionContext) -> None:
    b = ctx.point("B")
    d = ctx.point("D")
    ctx.set_point("E", lerp(b, d, ctx.unit / distance(b, d)))
    ctx.add_point_marker("E")
