# antifragile/core/analysis.py
# Derived queries built on the convexity probe.
#
# Every query is available twice:
#   - as a free function taking the system as first argument, usable with
#     any object that has payoff() (no base class required);
#   - as a method of TriadAnalysis, for systems that subclass it.
# The methods delegate to the free functions; there is one implementation.
#
# gains_from_stress() and is_stable() compare two payoffs directly. They are
# monotonicity / flatness checks and say nothing about convexity. A cache
# that warms up under load gains from stress without being convex.
#
# DETERMINISM GUARANTEE:
#   No side effects, no I/O, no logging, no global mutable state.
#
# Standard import pattern:
#   from antifragile.core.analysis import TriadAnalysis, PayoffFunction

from __future__ import annotations

from typing import Any, Callable, Optional

from antifragile.core.contract import Antifragile, P, S
from antifragile.core.convexity import (
    absolute_difference,
    classify,
    classify_with_tolerance,
    sample_convexity,
    ConvexitySample,
)
from antifragile.core.triad import Triad


# =============================================================================
# SECTION 1 -- FREE FUNCTIONS
# =============================================================================

def is_antifragile(system: Any, at: Any, delta: Any) -> bool:
    """True when the strict test classifies the system as ANTIFRAGILE."""
    return classify(system, at, delta) is Triad.ANTIFRAGILE


def gains_from_stress(system: Any, low: Any, high: Any) -> bool:
    """
    Does higher stress give a better payoff?

    Returns payoff(high) > payoff(low). No convexity claim is made.
    """
    return system.payoff(high) > system.payoff(low)


def is_stable(system: Any, low: Any, high: Any, threshold: Any) -> bool:
    """
    True when |payoff(high) - payoff(low)| <= threshold.

    The difference is taken larger-minus-smaller, so the result does not
    depend on which side is larger and payoff types need no abs().
    """
    return absolute_difference(system.payoff(high), system.payoff(low)) <= threshold


# =============================================================================
# SECTION 2 -- MIXIN
# =============================================================================

class TriadAnalysis(Antifragile[S, P]):
    """
    Antifragile base class with the classification queries attached.

    Subclasses implement payoff() (and optionally twin()) and get classify,
    classify_with_tolerance, sample, is_antifragile, gains_from_stress and
    is_stable for free.
    """

    def classify(self, at: S, delta: S) -> Triad:
        return classify(self, at, delta)

    def classify_with_tolerance(self, at: S, delta: S, epsilon: P) -> Triad:
        return classify_with_tolerance(self, at, delta, epsilon)

    def sample(self, at: S, delta: S) -> ConvexitySample:
        return sample_convexity(self, at, delta)

    def is_antifragile(self, at: S, delta: S) -> bool:
        return is_antifragile(self, at, delta)

    def gains_from_stress(self, low: S, high: S) -> bool:
        return gains_from_stress(self, low, high)

    def is_stable(self, low: S, high: S, threshold: P) -> bool:
        return is_stable(self, low, high, threshold)


# =============================================================================
# SECTION 3 -- CALLABLE ADAPTER
# =============================================================================

class PayoffFunction(TriadAnalysis[S, P]):
    """
    Wrap a plain callable as a classifiable system.

        square = PayoffFunction(lambda x: x * x, name="x^2")
        square.classify(10.0, 1.0)   # Triad.ANTIFRAGILE

    An optional twin callable overrides the default doubling path.
    """

    def __init__(
        self,
        fn: Callable[[S], P],
        name: str = "",
        twin: Optional[Callable[[P], P]] = None,
    ) -> None:
        if not callable(fn):
            raise TypeError("PayoffFunction: fn must be callable")
        self._fn = fn
        self._twin = twin
        self.name: str = name or getattr(fn, "__name__", "payoff")

    def payoff(self, stressor: S) -> P:
        return self._fn(stressor)

    def twin(self, value: P) -> P:
        if self._twin is None:
            return value + value
        return self._twin(value)

    def __repr__(self) -> str:
        return "PayoffFunction(name=" + repr(self.name) + ")"


__all__ = [
    "is_antifragile",
    "gains_from_stress",
    "is_stable",
    "TriadAnalysis",
    "PayoffFunction",
]
