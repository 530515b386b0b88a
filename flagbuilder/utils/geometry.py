"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from flagbuilder.primitives import Point

PARALLEL_EPSILON = 1e-10


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def midpoint(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def lerp(p1: Point, p2: Point, t: float) -> Point:
    """Point at parameter t along p1 -> p2 (t=0 is p1, t=1 is p2)."""
    return Point(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))


def interpolate_at_x(p1: Point, p2: Point, x: float) -> Point:
    """Point on line p1p2 with the given x coordinate."""
    t = (x - p1.x) / (p2.x - p1.x)
    return Point(x, p1.y + t * (p2.y - p1.y))


def interpolate_at_y(p1: Point, p2: Point, y: float) -> Point:
    """Point on line p1p2 with the given y coordinate."""
    t = (y - p1.y) / (p2.y - p1.y)
    return Point(p1.x + t * (p2.x - p1.x), y)


def to_points(coords: NDArray[np.float64]) -> tuple[Point, ...]:
    """Nx2 array -> tuple of Points."""
    return tuple(Point(float(x), float(y)) for x, y in coords)


def sample_line(p1: Point, p2: Point, segments: int = 2) -> tuple[Point, ...]:
    """Evenly spaced samples from p1 to p2 inclusive (segments + 1 points)."""
    t = np.arange(segments + 1, dtype=np.float64) / segments
    xs = p1.x + t * (p2.x - p1.x)
    ys = p1.y + t * (p2.y - p1.y)
    return to_points(np.column_stack([xs, ys]))


def sample_arc(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    segments: int = 20,
) -> tuple[Point, ...]:
    """Sample an arc swept linearly from start_angle to end_angle (radians).

    Angles use the standard orientation with y up: (pi, 0) walks the upper
    half through pi/2, (0, pi) the same half in the other direction.
    """
    t = np.arange(segments + 1, dtype=np.float64) / segments
    angles = start_angle + t * (end_angle - start_angle)
    xs = center.x + radius * np.cos(angles)
    ys = center.y + radius * np.sin(angles)
    return to_points(np.column_stack([xs, ys]))


def sample_circle(center: Point, radius: float, segments: int = 30) -> tuple[Point, ...]:
    """Closed circle: first and last samples coincide."""
    return sample_arc(center, radius, 0.0, 2 * math.pi, segments)


def line_intersection(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    eps: float = PARALLEL_EPSILON,
) -> Point | None:
    """Intersection of infinite lines p1p2 and p3p4.

    Returns None when the lines are parallel (denominator below eps).
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < eps:
        return None
    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    return lerp(p1, p2, t)


def point_line_distance(p: Point, a: Point, b: Point) -> float:
    """Perpendicular distance from p to the infinite line ab."""
    dx = b.x - a.x
    dy = b.y - a.y
    return abs(dx * (a.y - p.y) - dy * (a.x - p.x)) / math.hypot(dx, dy)


def angle_to(origin: Point, target: Point) -> float:
    """Polar angle of target as seen from origin."""
    return math.atan2(target.y - origin.y, target.x - origin.x)
