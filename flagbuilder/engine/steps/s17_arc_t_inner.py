"""Step 17: Inner arc centre T, radius TM."""

from __future__ import annotations

import math

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import distance


@construction_step(
    index=17,
    label="T-arc-inner",
    requires=["T", "M"],
    description="Centre T, radius TM, draw arc",
)
def arc_t_inner(ctx: ConstructionContext) -> None:
    t = ctx.point("T")
    ctx.add_arc(t, distance(t, ctx.point("M")), 0.0, math.pi, "T-arc-inner")
