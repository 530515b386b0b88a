"""Tests for the construction engine: replay, clamping, monotonicity, scaling."""

import pytest

from flagbuilder.engine.builder import FlagConstructionEngine, build, build_up_to_step, clamp_step
from flagbuilder.engine.config import STEP_COUNT
from flagbuilder.engine.registry import StepRegistry, StepSpec
from flagbuilder.primitives import DecorationKind, MoonParams, Point, SunParams
from tests.conftest import POINT_STEPS, SCALE, TOL, close


def _coords(result):
    out = [p.as_tuple() for p in result.outline]
    for record in result.construction_lines:
        out.extend(p.as_tuple() for p in record.points)
    return out


class TestClamping:
    def test_clamp_step(self):
        assert clamp_step(-5) == 0
        assert clamp_step(0) == 0
        assert clamp_step(7) == 7
        assert clamp_step(99) == STEP_COUNT

    @pytest.mark.parametrize("step", [-3, 0])
    def test_non_positive_step_runs_nothing(self, engine, step):
        result = engine.build_up_to_step(step)
        assert result.construction_lines == []
        assert result.points == {}
        assert result.completed_step == 0
        assert result.errors == {}

    def test_overshoot_equals_full_build(self, engine):
        assert engine.build_up_to_step(24) == engine.build_up_to_step(STEP_COUNT)
        assert engine.build_up_to_step(1000).completed_step == STEP_COUNT


class TestOutline:
    def test_step_zero_uses_fallbacks(self, engine):
        outline = engine.build_up_to_step(0).outline
        assert len(outline) == 5
        expected = [
            Point(0, 0),
            Point(100, 0),
            Point(100, 100),
            Point(100, 100),
            Point(0, 100 * 4 / 3),
        ]
        for got, want in zip(outline, expected):
            assert close(got, want)

    def test_full_outline_uses_derived_points(self, engine):
        result = engine.build()
        pts = result.points
        assert result.outline == [pts["A"], pts["B"], pts["E"], pts["G"], pts["C"]]

    def test_partial_outline_mixes_fallbacks(self, engine):
        result = engine.build_up_to_step(2)
        # A, B, C derived; E and G still on their placeholders
        assert result.outline[2] == Point(SCALE, SCALE)
        assert result.outline[4] == result.points["C"]

    def test_dimensions(self, engine):
        dims = engine.build_up_to_step(0).dimensions
        assert dims.width == SCALE
        assert dims.height == pytest.approx(SCALE * 4 / 3, abs=TOL)


class TestDecorations:
    @pytest.mark.parametrize("step", range(0, STEP_COUNT + 1))
    def test_moon_and_sun_presence(self, engine, step):
        result = engine.build_up_to_step(step)
        moons = result.decorations_of(DecorationKind.MOON)
        suns = result.decorations_of(DecorationKind.SUN)
        assert len(moons) == (1 if step >= 18 else 0)
        assert len(suns) == (1 if step >= 22 else 0)

    @pytest.mark.parametrize("scale", [1.0, 37.5, 100.0, 640.0])
    def test_parameters(self, scale):
        result = build(scale)
        (moon,) = result.decorations_of(DecorationKind.MOON)
        (sun,) = result.decorations_of(DecorationKind.SUN)
        assert moon.params == MoonParams(rays=8)
        assert sun.params == SunParams(rays=12)
        assert moon.position == result.points["M"]
        assert sun.position == result.points["W"]
        assert moon.scale == pytest.approx(scale / 8)
        assert sun.scale == pytest.approx(scale / 6)
        assert moon.color == "#FFFFFF"


class TestReplay:
    def test_build_equals_build_up_to_last_step(self):
        for scale in (1.0, 100.0, 333.3):
            assert build(scale) == build_up_to_step(scale, STEP_COUNT)

    def test_idempotent_on_same_instance(self, engine):
        first = engine.build_up_to_step(15)
        second = engine.build_up_to_step(15)
        assert first == second
        assert first is not second

    def test_no_state_leaks_between_builds(self, engine):
        engine.build()
        partial = engine.build_up_to_step(3)
        assert set(partial.points) == {"A", "B", "C", "D"}
        assert partial.decorations == []

    @pytest.mark.parametrize("step", range(1, STEP_COUNT))
    def test_records_are_prefix_of_next_step(self, engine, step):
        current = engine.build_up_to_step(step).construction_lines
        following = engine.build_up_to_step(step + 1).construction_lines
        assert following[: len(current)] == current
        assert len(following) >= len(current)

    @pytest.mark.parametrize("step", range(1, STEP_COUNT + 1))
    def test_points_appear_at_their_step(self, engine, step):
        result = engine.build_up_to_step(step)
        expected = {label for label, s in POINT_STEPS.items() if s <= step}
        assert set(result.points) == expected
        assert result.completed_step == step

    def test_records_tagged_with_emitting_step(self, engine):
        result = engine.build()
        steps = [r.step for r in result.construction_lines]
        assert steps == sorted(steps)
        # 18 and 22 only unlock decorations
        assert {r.step for r in result.construction_lines} == set(range(1, 18)) | {19, 20, 21}

    def test_result_owned_by_caller(self, engine):
        result = engine.build_up_to_step(5)
        result.construction_lines.clear()
        result.points.clear()
        again = engine.build_up_to_step(5)
        assert again.construction_lines
        assert "E" in again.points


class TestScaleInvariance:
    @pytest.mark.parametrize("s1,s2", [(100.0, 250.0), (1.0, 37.0), (640.0, 3.5)])
    def test_coordinates_scale_linearly(self, s1, s2):
        r1 = build(s1)
        r2 = build(s2)
        ratio = s2 / s1
        c1 = _coords(r1)
        c2 = _coords(r2)
        assert len(c1) == len(c2)
        for (x1, y1), (x2, y2) in zip(c1, c2):
            assert x2 == pytest.approx(x1 * ratio, rel=1e-9, abs=1e-9 * s2)
            assert y2 == pytest.approx(y1 * ratio, rel=1e-9, abs=1e-9 * s2)


class TestFailureHandling:
    def test_failing_step_stops_replay_without_raising(self):
        reg = StepRegistry()
        calls = []

        def ok(ctx):
            calls.append(1)
            ctx.set_point("A", Point(0, 0))
            ctx.add_point_marker("A")

        def broken(ctx):
            calls.append(2)
            ctx.add_line(ctx.point("A"), Point(1, 1), "half-done")
            ctx.point("Z")

        def never(ctx):
            calls.append(3)

        reg.register(StepSpec(index=1, fn=ok, provides=["A"]))
        reg.register(StepSpec(index=2, fn=broken))
        reg.register(StepSpec(index=3, fn=never))

        result = FlagConstructionEngine(SCALE, registry=reg).build_up_to_step(3)
        assert calls == [1, 2]
        assert result.completed_step == 1
        assert 2 in result.errors
        assert "MissingPointError" in result.errors[2]
        # The failed step's partial record is rolled back
        assert [r.label for r in result.construction_lines] == ["A"]

    def test_zero_scale_degrades(self):
        result = build_up_to_step(0.0, STEP_COUNT)
        assert result.errors
        assert len(result.outline) == 5


class TestIterBuild:
    def test_yields_one_event_per_step(self, engine):
        gen = engine.iter_build(6)
        events = []
        while True:
            try:
                events.append(next(gen))
            except StopIteration as stop:
                result = stop.value
                break
        assert [e["step"] for e in events] == [1, 2, 3, 4, 5, 6]
        assert all(e["status"] == "ok" for e in events)
        assert sum(e["records_added"] for e in events) == len(result.construction_lines)
        assert result == engine.build_up_to_step(6)

    def test_reports_derived_points(self, engine):
        events = list(engine.iter_build(5))
        assert events[4]["points"] == ["F", "G"]
