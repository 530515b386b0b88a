"""GeometryResult -> GeometryResponse API model."""

from __future__ import annotations

from flagbuilder.models.responses import (
    ConstructionRecordModel,
    DecorationModel,
    DimensionsModel,
    GeometryResponse,
    PointModel,
)
from flagbuilder.primitives import GeometryResult, Point


def _pt(p: Point) -> PointModel:
    return PointModel(x=p.x, y=p.y)


def result_to_response(
    result: GeometryResult,
    flag_id: str,
    scale: float,
    requested_step: int | None = None,
    processing_time_ms: float = 0.0,
) -> GeometryResponse:
    return GeometryResponse(
        flag_id=flag_id,
        scale=scale,
        requested_step=requested_step,
        completed_step=result.completed_step,
        shape=[_pt(p) for p in result.outline],
        decorations=[
            DecorationModel(
                type=d.kind.value,
                position=_pt(d.position),
                z=d.z,
                scale=d.scale,
                color=d.color,
                rays=d.params.rays,
            )
            for d in result.decorations
        ],
        dimensions=DimensionsModel(
            width=result.dimensions.width,
            height=result.dimensions.height,
        ),
        construction_lines=[
            ConstructionRecordModel(
                type=r.kind.value,
                points=[_pt(p) for p in r.points],
                label=r.label,
                color=r.color,
                dashed=r.dashed,
                step=r.step,
            )
            for r in result.construction_lines
        ],
        points={label: _pt(p) for label, p in result.points.items()},
        errors=result.errors,
        processing_time_ms=round(processing_time_ms, 3),
    )
