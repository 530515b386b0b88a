"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flagbuilder import __version__
from flagbuilder.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.flagbuilder_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Flag Builder",
        description="Constitutional flag construction engine: step-by-step geometry",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all step modules so @construction_step decorators fire
    from flagbuilder.engine.registry import load_steps

    load_steps()

    from flagbuilder.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
