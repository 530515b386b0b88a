"""FastAPI dependency injection."""

from __future__ import annotations

from flagbuilder.catalog.registry import FlagCatalog, get_catalog
from flagbuilder.config import Settings, settings


def get_settings() -> Settings:
    return settings


def get_flag_catalog() -> FlagCatalog:
    return get_catalog()
