"""Step 09: Join J and G (construction aid only)."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step


@construction_step(
    index=9,
    label="JG",
    requires=["J", "G"],
    description="Join J and G",
)
def join_jg(ctx: ConstructionContext) -> None:
    ctx.add_line(ctx.point("J"), ctx.point("G"), "JG", dashed=True)
