"""Step 18: Moon.

No new geometry. The eight cusps are drawn by the renderer from M's position.
"""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import DecorationKind


@construction_step(
    index=18,
    label="moon",
    requires=["M"],
    description="Create 8 triangles for moon crescent",
)
def moon(ctx: ConstructionContext) -> None:
    ctx.eligible_decorations.add(DecorationKind.MOON)
