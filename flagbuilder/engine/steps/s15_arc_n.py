"""Step 15: Arc centre N, radius NM, giving R, S and T.

R and S are the first and last samples of the arc swept from the direction
of Q to the direction of P. They are not re-solved as circle intersections:
T, and everything drawn from T, depends on these exact samples.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import angle_to, distance


@construction_step(
    index=15,
    label="N-arc",
    provides=["R", "S", "T"],
    requires=["N", "M", "P", "Q", "H"],
    description="Centre N, radius NM, draw arc",
)
def arc_n(ctx: ConstructionContext) -> None:
    n = ctx.point("N")
    record = ctx.add_arc(
        n,
        distance(n, ctx.point("M")),
        angle_to(n, ctx.point("Q")),
        angle_to(n, ctx.point("P")),
        "N-arc",
    )
    r = ctx.set_point("R", record.points[0])
    s = ctx.set_point("S", record.points[-1])
    # T is where RS crosses HI
    ctx.set_point("T", Point(ctx.point("H").x, (r.y + s.y) / 2))
