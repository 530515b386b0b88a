"""Step 14: Semicircle centre M, radius MQ."""

from __future__ import annotations

import math

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import distance


@construction_step(
    index=14,
    label="M-semicircle",
    requires=["M", "Q"],
    description="Centre M, radius MQ, draw semi-circle",
)
def semicircle_m(ctx: ConstructionContext) -> None:
    m = ctx.point("M")
    ctx.add_arc(m, distance(m, ctx.point("Q")), math.pi, 0.0, "M-semicircle")
