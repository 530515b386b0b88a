"""Catalog endpoints: list flags, fetch one, SVG preview."""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from flagbuilder.catalog.models import FlagDefinition
from flagbuilder.catalog.registry import FlagCatalog
from flagbuilder.config import Settings
from flagbuilder.dependencies import get_flag_catalog, get_settings
from flagbuilder.models.responses import FlagSummary
from flagbuilder.render.svg_preview import render_geometry_svg

router = APIRouter()


def resolve_flag(flag_id: str, catalog: FlagCatalog) -> FlagDefinition:
    flag = catalog.get(flag_id)
    if flag is None:
        raise HTTPException(status_code=404, detail=f"Unknown flag: {flag_id}")
    return flag


def check_scale(scale: float, cfg: Settings) -> None:
    """Reject scales the request models let through: non-finite or above max_scale."""
    if not math.isfinite(scale) or scale > cfg.max_scale:
        raise HTTPException(
            status_code=422,
            detail=f"scale must be finite and at most {cfg.max_scale}",
        )
@router.get("/flags", response_model=list[FlagSummary])
async def list_flags(catalog: FlagCatalog = Depends(get_flag_catalog)) -> list[FlagSummary]:
    return [
        FlagSummary(
            id=f.id,
            name=f.name,
            country=f.country,
            type=f.type,
            step_count=f.step_count,
            colors=f.colors,
        )
        for f in catalog.all()
    ]


@router.get("/flags/{flag_id}", response_model=FlagDefinition)
async def get_flag(flag_id: str, catalog: FlagCatalog = Depends(get_flag_catalog)) -> FlagDefinition:
    return resolve_flag(flag_id, catalog)


@router.get("/flags/{flag_id}/preview.svg")
async def preview(
    flag_id: str,
    scale: float = Query(default=100.0, gt=0),
    step: int | None = Query(default=None),
    construction: bool = Query(default=True),
    catalog: FlagCatalog = Depends(get_flag_catalog),
    cfg: Settings = Depends(get_settings),
) -> Response:
    flag = resolve_flag(flag_id, catalog)
    check_scale(scale, cfg)
    engine = flag.engine(scale)
    result = engine.build() if step is None else engine.build_up_to_step(step)
    svg = render_geometry_svg(
        result,
        colors=flag.colors,
        show_construction=construction,
        title=flag.name,
    )
    return Response(content=svg, media_type="image/svg+xml")
