"""Shared test fixtures."""

from __future__ import annotations

import pytest

from flagbuilder.engine.builder import FlagConstructionEngine
from flagbuilder.primitives import Point

SCALE = 100.0
TOL = 1e-9

# Steps after which each named point exists
POINT_STEPS = {
    "A": 1, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 5, "H": 6, "I": 6,
    "J": 7, "K": 7, "L": 8, "M": 10, "N": 11, "O": 12, "P": 13, "Q": 13,
    "R": 15, "S": 15, "T": 15, "U": 19, "V": 19, "W": 20,
}


def close(p: Point, q: Point, tol: float = TOL) -> bool:
    return abs(p.x - q.x) <= tol and abs(p.y - q.y) <= tol


@pytest.fixture
def engine() -> FlagConstructionEngine:
    return FlagConstructionEngine(SCALE)


@pytest.fixture
def full_points(engine):
    return engine.build().points
