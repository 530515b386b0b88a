"""Flag construction engine."""

from flagbuilder.engine.builder import FlagConstructionEngine, build, build_up_to_step
from flagbuilder.engine.config import STEP_COUNT, ConstructionConfig
from flagbuilder.engine.context import ConstructionContext, MissingPointError
from flagbuilder.engine.registry import construction_step, get_registry, load_steps

__all__ = [
    "FlagConstructionEngine",
    "build",
    "build_up_to_step",
    "STEP_COUNT",
    "ConstructionConfig",
    "ConstructionContext",
    "MissingPointError",
    "construction_step",
    "get_registry",
    "load_steps",
]
