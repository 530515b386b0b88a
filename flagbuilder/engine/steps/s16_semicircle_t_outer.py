"""Step 16: Outer semicircle centre T, radius TS."""

from __future__ import annotations

import math

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import distance


@construction_step(
    index=16,
    label="T-semicircle-outer",
    requires=["T", "S"],
    description="Centre T, radius TS, draw semi-circle",
)
def semicircle_t_outer(ctx: ConstructionContext) -> None:
    t = ctx.point("T")
    ctx.add_arc(t, distance(t, ctx.point("S")), 0.0, math.pi, "T-semicircle-outer")
