"""Step 22: Sun. Twelve rays around W, drawn by the renderer."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import construction_step
from flagbuilder.primitives import DecorationKind


@construction_step(
    index=22,
    label="sun",
    requires=["W"],
    description="Create 12 triangles for sun rays",
)
def sun(ctx: ConstructionContext) -> None:
    ctx.eligible_decorations.add(DecorationKind.SUN)
