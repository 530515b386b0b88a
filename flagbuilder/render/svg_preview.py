"""Standalone SVG previews of a GeometryResult.

Turns the outline, construction records and decorations into one SVG document
for a quick look at any step. Shapely handles the polygon work and the
y-flip; the markup is plain string formatting.
"""

from __future__ import annotations

import math
from xml.sax.saxutils import escape

from shapely import affinity
from shapely.geometry import LineString, Polygon
from shapely.geometry import Point as ShapelyPoint

from flagbuilder.catalog.models import FlagColors
from flagbuilder.primitives import Decoration, GeometryResult, Point, RecordKind

_DEFAULT_COLORS = FlagColors(primary="#DC143C", secondary="#FFFFFF", border="#003893")

# Inner radius of a ray star as a fraction of its outer radius
_STAR_INNER_RATIO = 0.6

_MARKER_RADIUS_RATIO = 0.012


def ray_star(center: Point, radius: float, rays: int, inner_ratio: float = _STAR_INNER_RATIO) -> Polygon:
    """Star polygon with ``rays`` points, first ray pointing straight up."""
    coords: list[tuple[float, float]] = []
    for i in range(rays * 2):
        r = radius if i % 2 == 0 else radius * inner_ratio
        angle = math.pi / 2 + i * math.pi / rays
        coords.append((center.x + r * math.cos(angle), center.y + r * math.sin(angle)))
    return Polygon(coords)


def _fmt(x: float) -> str:
    return f"{x:.2f}"


def _path_d(coords) -> str:
    pts = list(coords)
    d = f"M {_fmt(pts[0][0])},{_fmt(pts[0][1])}"
    for x, y in pts[1:]:
        d += f" L {_fmt(x)},{_fmt(y)}"
    return d


def _polygon_to_svg_path(poly: Polygon, fill: str, stroke: str = "none", stroke_width: float = 0.0) -> str:
    if poly.is_empty or len(poly.exterior.coords) < 3:
        return ""
    d = _path_d(poly.exterior.coords) + " Z"
    return f'<path d="{d}" fill="{fill}" stroke="{stroke}" stroke-width="{_fmt(stroke_width)}"/>'


def _svg_wrap(content: str, width: float, height: float, title: str = "") -> str:
    title_el = f"\n<title>{escape(title)}</title>" if title else ""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {_fmt(width)} {_fmt(height)}"'
        f' width="{_fmt(width)}" height="{_fmt(height)}">'
        f"{title_el}\n{content}\n</svg>"
    )


def render_geometry_svg(
    result: GeometryResult,
    colors: FlagColors | None = None,
    show_construction: bool = True,
    margin_ratio: float = 0.1,
    title: str = "",
) -> str:
    """Render one build as a standalone SVG document."""
    colors = colors or _DEFAULT_COLORS
    width = result.dimensions.width
    height = result.dimensions.height
    margin = max(width, height) * margin_ratio
    canvas_w = width + 2 * margin
    canvas_h = height + 2 * margin
    stroke = max(width, height) * 0.004

    # Construction space is y-up, SVG is y-down
    def to_svg(geom):
        return affinity.affine_transform(geom, [1, 0, 0, -1, margin, height + margin])

    parts: list[str] = []

    outline = Polygon([p.as_tuple() for p in result.outline])
    parts.append(_polygon_to_svg_path(
        to_svg(outline), colors.primary, colors.border or "none", stroke * 2
    ))

    for deco in result.decorations:
        parts.append(_decoration_svg(deco, to_svg))

    if show_construction:
        for record in result.construction_lines:
            parts.append(_record_svg(record, to_svg, stroke, max(width, height)))

    return _svg_wrap("\n".join(p for p in parts if p), canvas_w, canvas_h, title)


def _decoration_svg(deco: Decoration, to_svg) -> str:
    star = ray_star(deco.position, deco.scale, deco.params.rays)
    return _polygon_to_svg_path(to_svg(star), deco.color)


def _record_svg(record, to_svg, stroke: float, extent: float) -> str:
    if record.kind == RecordKind.POINT:
        p = to_svg(ShapelyPoint(record.points[0].as_tuple())).coords[0]
        r = extent * _MARKER_RADIUS_RATIO
        return (
            f'<circle cx="{_fmt(p[0])}" cy="{_fmt(p[1])}" r="{_fmt(r)}" fill="{record.color}"/>'
            f'<text x="{_fmt(p[0] + r * 1.5)}" y="{_fmt(p[1] - r * 1.5)}"'
            f' font-size="{_fmt(r * 4)}" fill="{record.color}">{escape(record.label)}</text>'
        )
    if len(record.points) < 2:
        return ""
    line = to_svg(LineString([p.as_tuple() for p in record.points]))
    dash = f' stroke-dasharray="{_fmt(stroke * 4)},{_fmt(stroke * 3)}"' if record.dashed else ""
    return (
        f'<path d="{_path_d(line.coords)}" fill="none" stroke="{record.color}"'
        f' stroke-width="{_fmt(stroke)}"{dash}/>'
    )
