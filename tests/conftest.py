# tests/conftest.py
# Reference systems shared by the unit and contract tests.
#
#   Convex   f(x) = x^2        -> ANTIFRAGILE everywhere (delta != 0)
#   Concave  f(x) = sqrt(|x|)  -> FRAGILE on x > delta > 0
#   Linear   f(x) = 2x + 5     -> ROBUST everywhere (integer payoffs tie exactly)

from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from antifragile.core.analysis import TriadAnalysis


@dataclass(frozen=True)
class ConvexSystem(TriadAnalysis[float, float]):
    scale: float = 1.0

    def payoff(self, stressor: float) -> float:
        return self.scale * stressor * stressor


@dataclass(frozen=True)
class ConcaveSystem(TriadAnalysis[float, float]):
    def payoff(self, stressor: float) -> float:
        return math.sqrt(abs(stressor))


@dataclass(frozen=True)
class LinearSystem(TriadAnalysis[int, int]):
    slope: int = 2
    intercept: int = 5

    def payoff(self, stressor: int) -> int:
        return self.slope * stressor + self.intercept


@pytest.fixture
def convex() -> ConvexSystem:
    return ConvexSystem()


@pytest.fixture
def concave() -> ConcaveSystem:
    return ConcaveSystem()


@pytest.fixture
def linear() -> LinearSystem:
    return LinearSystem()
