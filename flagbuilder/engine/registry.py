"""Step registry: every construction step is a standalone function registered via decorator.

Usage:
    @construction_step(index=8, label="L", provides=["L"], requires=["H", "J"])
    def intersection_l(ctx: ConstructionContext) -> None:
        ctx.set_point("L", Point(ctx.point("H").x, ctx.point("J").y))
        ctx.add_point_marker("L")

Adding a new step = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from flagbuilder.engine.context import ConstructionContext

logger = logging.getLogger(__name__)


@dataclass
class StepSpec:
    index: int
    fn: Callable[["ConstructionContext"], None]
    label: str = ""
    description: str = ""
    # Named points this step derives
    provides: list[str] = field(default_factory=list)
    # Named points this step reads; each must come from a strictly earlier step
    requires: list[str] = field(default_factory=list)


class StepRegistry:
    """Ordered registry of construction steps, keyed by step index."""

    def __init__(self) -> None:
        self._steps: dict[int, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.index in self._steps:
            raise ValueError(f"Duplicate step index: {spec.index}")
        self._steps[spec.index] = spec
        logger.debug("Registered step %d (%s)", spec.index, spec.fn.__name__)

    def get(self, index: int) -> StepSpec:
        return self._steps[index]

    def all(self) -> list[StepSpec]:
        return [self._steps[i] for i in sorted(self._steps)]

    def up_to(self, index: int) -> list[StepSpec]:
        """Steps 1..index in order. Empty for index < 1."""
        return [s for s in self.all() if s.index <= index]

    def validate(self) -> None:
        """Check the step order is a total order with no forward references."""
        indices = sorted(self._steps)
        if indices != list(range(1, len(indices) + 1)):
            raise ValueError(f"Step indices must run contiguously from 1, got {indices}")

        available: set[str] = set()
        for spec in self.all():
            missing = set(spec.requires) - available
            if missing:
                raise ValueError(
                    f"Step {spec.index} requires {sorted(missing)} before they are derived"
                )
            duplicated = set(spec.provides) & available
            if duplicated:
                raise ValueError(f"Step {spec.index} re-derives {sorted(duplicated)}")
            available.update(spec.provides)

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singleton
_registry = StepRegistry()


def get_registry() -> StepRegistry:
    return _registry


def construction_step(
    *,
    index: int,
    label: str = "",
    description: str = "",
    provides: list[str] | None = None,
    requires: list[str] | None = None,
):
    """Decorator to register a construction step function."""

    def decorator(fn: Callable[["ConstructionContext"], None]):
        spec = StepSpec(
            index=index,
            fn=fn,
            label=label,
            description=description,
            provides=provides or [],
            requires=requires or [],
        )
        _registry.register(spec)
        return fn

    return decorator


_loaded = False


def load_steps() -> StepRegistry:
    """Import every module under flagbuilder.engine.steps so @construction_step fires.

    Scans and validates once per process; later calls return the loaded registry.
    """
    global _loaded
    if _loaded:
        return _registry
    package = importlib.import_module("flagbuilder.engine.steps")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    _registry.validate()
    _loaded = True
    logger.debug("Loaded %d construction steps", _registry.count)
    return _registry
