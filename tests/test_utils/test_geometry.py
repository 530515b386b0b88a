"""Tests for the sampling and intersection helpers."""

import math

import pytest

from flagbuilder.primitives import Point
from flagbuilder.utils.geometry import (
    angle_to,
    distance,
    interpolate_at_x,
    interpolate_at_y,
    line_intersection,
    midpoint,
    point_line_distance,
    sample_arc,
    sample_circle,
    sample_line,
)


def test_distance_and_midpoint():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert midpoint(Point(0, 0), Point(2, 6)) == Point(1, 3)


def test_sample_line_endpoints_and_count():
    pts = sample_line(Point(0, 0), Point(10, 20), segments=4)
    assert len(pts) == 5
    assert pts[0] == Point(0, 0)
    assert pts[-1] == Point(10, 20)
    assert pts[2] == Point(5, 10)


def test_sample_arc_follows_radius():
    center = Point(1, 2)
    pts = sample_arc(center, 3.0, 0.0, math.pi, segments=6)
    assert len(pts) == 7
    for p in pts:
        assert distance(center, p) == pytest.approx(3.0)
    assert pts[0].x == pytest.approx(4.0)
    assert pts[-1].x == pytest.approx(-2.0)


def test_sample_arc_pi_to_zero_passes_through_top():
    pts = sample_arc(Point(0, 0), 1.0, math.pi, 0.0, segments=2)
    assert pts[1].x == pytest.approx(0.0, abs=1e-12)
    assert pts[1].y == pytest.approx(1.0)


def test_sample_circle_is_closed():
    pts = sample_circle(Point(0, 0), 2.0, segments=40)
    assert len(pts) == 41
    assert pts[0].x == pytest.approx(pts[-1].x)
    assert pts[0].y == pytest.approx(pts[-1].y, abs=1e-12)


def test_line_intersection_crossing():
    p = line_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert p is not None
    assert p.x == pytest.approx(1.0)
    assert p.y == pytest.approx(1.0)


def test_line_intersection_vertical_with_slanted():
    p = line_intersection(Point(0, 10), Point(100, 0), Point(25, 0), Point(25, 50))
    assert p.x == pytest.approx(25.0)
    assert p.y == pytest.approx(7.5)


def test_line_intersection_parallel_returns_none():
    assert line_intersection(Point(0, 0), Point(1, 1), Point(0, 1), Point(2, 3)) is None


def test_line_intersection_collinear_returns_none():
    assert line_intersection(Point(0, 0), Point(1, 0), Point(2, 0), Point(5, 0)) is None


def test_point_line_distance():
    assert point_line_distance(Point(0, 0), Point(1, 0), Point(0, 1)) == pytest.approx(math.sqrt(0.5))
    assert point_line_distance(Point(3, 7), Point(0, 0), Point(10, 0)) == pytest.approx(7.0)


def test_interpolate_at_axis():
    assert interpolate_at_x(Point(0, 0), Point(10, 20), 5) == Point(5, 10)
    assert interpolate_at_y(Point(0, 0), Point(10, 20), 5) == Point(2.5, 5)


def test_angle_to():
    assert angle_to(Point(0, 0), Point(0, 1)) == pytest.approx(math.pi / 2)
    assert angle_to(Point(1, 1), Point(0, 1)) == pytest.approx(math.pi)
