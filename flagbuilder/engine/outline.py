"""Outline and decoration assembly from whatever named points a build derived."""

from __future__ import annotations

from flagbuilder.engine.context import ConstructionContext
from flagbuilder.primitives import Decoration, DecorationKind, MoonParams, Point, SunParams


def fallback_points(unit: float, height: float) -> dict[str, Point]:
    """Placeholder silhouette used before the real points exist (a plain quad)."""
    return {
        "A": Point(0.0, 0.0),
        "B": Point(unit, 0.0),
        "E": Point(unit, unit),
        "G": Point(unit, unit),
        "C": Point(0.0, height),
    }


OUTLINE_LABELS = ("A", "B", "E", "G", "C")


def build_outline(ctx: ConstructionContext) -> list[Point]:
    """Pennant silhouette A-B-E-G-C, each vertex falling back until derived."""
    fallback = fallback_points(ctx.unit, ctx.height)
    return [ctx.points.get(label, fallback[label]) for label in OUTLINE_LABELS]


def build_decorations(ctx: ConstructionContext) -> list[Decoration]:
    cfg = ctx.config
    decorations: list[Decoration] = []

    if DecorationKind.MOON in ctx.eligible_decorations and ctx.has("M"):
        decorations.append(Decoration(
            kind=DecorationKind.MOON,
            position=ctx.point("M"),
            scale=ctx.unit * cfg.moon_scale_ratio,
            color=cfg.decoration_color,
            params=MoonParams(rays=8),
        ))

    if DecorationKind.SUN in ctx.eligible_decorations and ctx.has("W"):
        decorations.append(Decoration(
            kind=DecorationKind.SUN,
            position=ctx.point("W"),
            scale=ctx.unit * cfg.sun_scale_ratio,
            color=cfg.decoration_color,
            params=SunParams(rays=12),
        ))

    return decorations
