"""Flag catalog. Supplies definitions to callers; the engine knows nothing about it."""

from flagbuilder.catalog.models import FlagColors, FlagDefinition, StepDescription
from flagbuilder.catalog.registry import FlagCatalog, all_flags, get_catalog, get_flag

__all__ = [
    "FlagColors",
    "FlagDefinition",
    "StepDescription",
    "FlagCatalog",
    "all_flags",
    "get_catalog",
    "get_flag",
]
