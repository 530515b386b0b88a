"""POST /api/geometry: build the flag through a given step."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from flagbuilder.api.flags import check_scale, resolve_flag
from flagbuilder.catalog.models import FlagDefinition
from flagbuilder.catalog.registry import FlagCatalog
from flagbuilder.config import Settings
from flagbuilder.dependencies import get_flag_catalog, get_settings
from flagbuilder.formatter import result_to_response
from flagbuilder.models.requests import GeometryRequest
from flagbuilder.models.responses import GeometryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


_SENTINEL = object()  # marks end of queue


async def _stream_build(flag: FlagDefinition, req: GeometryRequest) -> AsyncGenerator[str, None]:
    """Drive engine.iter_build() in a thread, yielding SSE events as steps complete."""
    start = time.perf_counter()
    engine = flag.engine(req.scale)
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()
    outcome: dict = {}

    def _run_engine() -> None:
        """Sync build in thread; pushes progress dicts onto the async queue."""
        try:
            gen = engine.iter_build(req.step)
            while True:
                try:
                    progress = next(gen)
                except StopIteration as stop:
                    outcome["result"] = stop.value
                    break
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        except Exception as e:
            outcome["error"] = f"{type(e).__name__}: {e}"
            logger.exception("Streaming build of %s failed", flag.id)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    loop.run_in_executor(None, _run_engine)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"

    result = outcome.get("result")
    if result is None:
        message = outcome.get("error", "build produced no result")
        yield f"event: error\ndata: {json.dumps({'type': 'error', 'message': message})}\n\n"
    else:
        elapsed = (time.perf_counter() - start) * 1000
        response = result_to_response(result, flag.id, req.scale, req.step, elapsed)
        yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/geometry/stream")
async def geometry_stream(
    req: GeometryRequest,
    catalog: FlagCatalog = Depends(get_flag_catalog),
    cfg: Settings = Depends(get_settings),
) -> StreamingResponse:
    flag = resolve_flag(req.flag_id, catalog)
    check_scale(req.scale, cfg)
    return StreamingResponse(
        _stream_build(flag, req),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/geometry", response_model=GeometryResponse)
async def geometry(
    req: GeometryRequest,
    catalog: FlagCatalog = Depends(get_flag_catalog),
    cfg: Settings = Depends(get_settings),
) -> GeometryResponse:
    flag = resolve_flag(req.flag_id, catalog)
    check_scale(req.scale, cfg)
    start = time.perf_counter()

    if req.step is None:
        result = flag.build_geometry(req.scale)
    else:
        result = flag.build_up_to_step(req.scale, req.step)

    elapsed = (time.perf_counter() - start) * 1000
    return result_to_response(result, flag.id, req.scale, req.step, elapsed)
