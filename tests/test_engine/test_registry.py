"""Tests for the step registry."""

import pytest

from flagbuilder.engine.config import STEP_COUNT
from flagbuilder.engine.context import ConstructionContext
from flagbuilder.engine.registry import StepRegistry, StepSpec, load_steps


def _noop(ctx: ConstructionContext) -> None:
    pass


def test_register_and_get():
    reg = StepRegistry()
    spec = StepSpec(index=1, fn=_noop, provides=["A"])
    reg.register(spec)
    assert reg.get(1) is spec
    assert reg.count == 1


def test_duplicate_index_rejected():
    reg = StepRegistry()
    reg.register(StepSpec(index=1, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(StepSpec(index=1, fn=_noop))


def test_all_is_ordered_by_index():
    reg = StepRegistry()
    for i in (3, 1, 2):
        reg.register(StepSpec(index=i, fn=_noop))
    assert [s.index for s in reg.all()] == [1, 2, 3]
    assert [s.index for s in reg.up_to(2)] == [1, 2]
    assert reg.up_to(0) == []


def test_validate_rejects_forward_reference():
    reg = StepRegistry()
    reg.register(StepSpec(index=1, fn=_noop, requires=["B"]))
    reg.register(StepSpec(index=2, fn=_noop, provides=["B"]))
    with pytest.raises(ValueError, match="requires"):
        reg.validate()


def test_validate_rejects_rederived_point():
    reg = StepRegistry()
    reg.register(StepSpec(index=1, fn=_noop, provides=["A"]))
    reg.register(StepSpec(index=2, fn=_noop, provides=["A"]))
    with pytest.raises(ValueError, match="re-derives"):
        reg.validate()


def test_validate_rejects_gaps():
    reg = StepRegistry()
    reg.register(StepSpec(index=1, fn=_noop))
    reg.register(StepSpec(index=3, fn=_noop))
    with pytest.raises(ValueError, match="contiguously"):
        reg.validate()


def test_loaded_registry_has_all_steps():
    reg = load_steps()
    assert reg.count == STEP_COUNT
    assert [s.index for s in reg.all()] == list(range(1, STEP_COUNT + 1))
    reg.validate()


def test_every_label_derived_exactly_once():
    reg = load_steps()
    provided = [label for s in reg.all() for label in s.provides]
    assert sorted(provided) == sorted(set(provided))
    assert set(provided) == set("ABCDEFGHIJKLMNOPQRSTUVW")


def test_load_steps_scans_only_once(monkeypatch):
    from flagbuilder.engine import registry as registry_module
    from flagbuilder.engine.builder import FlagConstructionEngine

    first = load_steps()

    def _fail(*args, **kwargs):
        raise AssertionError("step package scanned again")

    monkeypatch.setattr(registry_module.pkgutil, "iter_modules", _fail)
    assert load_steps() is first
    engine = FlagConstructionEngine(100.0)
    assert engine.registry is first
    assert engine.build().completed_step == STEP_COUNT
