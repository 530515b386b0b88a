"""Step 13: Semicircle centre L, radius LN.

P and Q, where it meets OM, are solved from the circle equation rather than
read off the sampled polyline.
"""

from __future__ import annotations

import math

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import distance


@construction_step(
    index=13,
    label="L-semicircle",
    provides=["P", "Q"],
    requires=["L", "N", "M"],
    description="Centre L, radius LN, draw semi-circle",
)
def semicircle_l(ctx: ConstructionContext) -> None:
    centre = ctx.point("L")
    m = ctx.point("M")
    radius = distance(centre, ctx.point("N"))
    ctx.add_arc(centre, radius, math.pi, 0.0, "L-semicircle")

    dy = centre.y - m.y
    dx = math.sqrt(radius * radius - dy * dy)
    ctx.set_point("P", Point(centre.x - dx, m.y))
    ctx.set_point("Q", Point(centre.x + dx, m.y))
