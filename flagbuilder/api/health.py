"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from flagbuilder import __version__
from flagbuilder.engine.registry import get_registry
from flagbuilder.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        steps_registered=get_registry().count,
    )
