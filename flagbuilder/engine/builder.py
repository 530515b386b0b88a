"""Construction engine: replays the registered steps in order and assembles the result."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from typing import Any

from flagbuilder.engine.config import STEP_COUNT, ConstructionConfig
from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.outline import build_decorations, build_outline
from flagbuilder.engine.registry import StepRegistry, StepSpec, load_steps
from flagbuilder.primitives import Dimensions, GeometryResult

logger = logging.getLogger(__name__)


def clamp_step(step: int, step_count: int = STEP_COUNT) -> int:
    """Out-of-range requests are clamped, never rejected."""
    return max(0, min(int(step), step_count))


class FlagConstructionEngine:
    """Deterministic step-by-step construction of the flag geometry.

    Holds no state between calls: every build starts from an empty context.
    One instance must not be shared across concurrent builds.
    """

    def __init__(
        self,
        scale: float = 100.0,
        registry: StepRegistry | None = None,
        config: ConstructionConfig | None = None,
    ) -> None:
        self.scale = float(scale)
        self.registry = registry if registry is not None else load_steps()
        self.config = config or ConstructionConfig()
        self._ctx = self._new_context()

    @property
    def step_count(self) -> int:
        return min(self.registry.count, STEP_COUNT)

    def build(self) -> GeometryResult:
        """Full construction (all geometry steps)."""
        return self.build_up_to_step(self.step_count)

    def build_up_to_step(self, target_step: int) -> GeometryResult:
        """Partial construction through ``target_step`` (clamped to [0, step_count])."""
        start = time.perf_counter()
        target = clamp_step(target_step, self.step_count)
        self._ctx = self._new_context()

        for spec in self.registry.up_to(target):
            if not self._run_step(spec):
                break

        result = self._assemble()
        logger.debug(
            "Built %d/%d steps at scale %.6g in %.2fms",
            result.completed_step,
            target,
            self.scale,
            (time.perf_counter() - start) * 1000,
        )
        return result

    def iter_build(self, target_step: int | None = None) -> Generator[dict[str, Any], None, GeometryResult]:
        """Run the construction, yielding a progress dict after each step.

        The generator's return value is the final GeometryResult.
        """
        target = clamp_step(self.step_count if target_step is None else target_step, self.step_count)
        self._ctx = self._new_context()
        ctx = self._ctx

        for spec in self.registry.up_to(target):
            before = len(ctx.records)
            t0 = time.perf_counter()
            ok = self._run_step(spec)
            yield {
                "step": spec.index,
                "label": spec.label,
                "description": spec.description,
                "total": target,
                "records_added": len(ctx.records) - before,
                "points": sorted(spec.provides) if ok else [],
                "elapsed_ms": round((time.perf_counter() - t0) * 1000, 3),
                "status": "ok" if ok else "error",
                "error": ctx.errors.get(spec.index, ""),
            }
            if not ok:
                break

        return self._assemble()

    def _new_context(self) -> ConstructionContext:
        return ConstructionContext(unit=self.scale, config=self.config)

    def _run_step(self, spec: StepSpec) -> bool:
        """Run one step. On failure, roll back its partial output and report False."""
        ctx = self._ctx
        ctx.current_step = spec.index
        records_before = len(ctx.records)
        points_before = dict(ctx.points)
        try:
            spec.fn(ctx)
        except Exception as e:
            del ctx.records[records_before:]
            ctx.points = points_before
            ctx.errors[spec.index] = f"{type(e).__name__}: {e}"
            logger.warning("  step %d (%s) FAILED: %s", spec.index, spec.label, e)
            return False
        ctx.completed_steps.append(spec.index)
        return True

    def _assemble(self) -> GeometryResult:
        ctx = self._ctx
        return GeometryResult(
            outline=build_outline(ctx),
            decorations=build_decorations(ctx),
            dimensions=Dimensions(width=ctx.unit, height=ctx.height),
            construction_lines=list(ctx.records),
            points=dict(ctx.points),
            completed_step=ctx.last_completed,
            errors=dict(ctx.errors),
        )


def build(scale: float) -> GeometryResult:
    """Full construction on a fresh engine."""
    return FlagConstructionEngine(scale).build()


def build_up_to_step(scale: float, step: int) -> GeometryResult:
    """Partial construction on a fresh engine."""
    return FlagConstructionEngine(scale).build_up_to_step(step)
