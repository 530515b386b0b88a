"""Step 10: M = JG x HI.

JG is slanted, so this is a true line/line solve.
"""

from __future__ import annotations

import logging

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.utils.geometry import interpolate_at_x, line_intersection

logger = logging.getLogger(__name__)


@construction_step(
    index=10,
    label="M",
    provides=["M"],
    requires=["J", "G", "H", "I"],
    description="M is intersection of JG and HI",
)
def intersection_m(ctx: ConstructionContext) -> None:
    j = ctx.point("J")
    g = ctx.point("G")
    h = ctx.point("H")
    m = line_intersection(j, g, h, ctx.point("I"), ctx.config.parallel_epsilon)
    if m is None:
        logger.debug("JG and HI reported parallel, evaluating JG at x=%.6g", h.x)
        m = interpolate_at_x(j, g, h.x)
    ctx.set_point("M", m)
    ctx.add_point_marker("M")
