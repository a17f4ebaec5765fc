# antifragile/core/convexity.py
# Three-point convexity probe.
#
# DETERMINISM GUARANTEE:
#   No stochastic operations. No external state reads. No side effects.
#   No file I/O. No logging. No global mutable state.
#   Output is a pure function of (system, at, delta[, epsilon]), provided
#   the system's own payoff() is pure.
#
# TEST DEFINITION:
#   f_minus = payoff(at - delta)
#   f_x     = payoff(at)
#   f_plus  = payoff(at + delta)
#   total   = f_plus + f_minus
#   twin    = twin(f_x)
#
#   total > twin  -> ANTIFRAGILE  (discrete second difference positive)
#   total < twin  -> FRAGILE      (discrete second difference negative)
#   otherwise     -> ROBUST       (linear; includes delta == 0)
#
#   Samples are evaluated in the order f_minus, f_x, f_plus.
#
# SCOPE NOTE:
#   The probe certifies local behaviour at (at, delta) only. A different
#   delta may flip the result for systems that are not globally convex or
#   concave. That is the caller's concern, not an error.
#
#   Unordered payoffs (NaN) make both strict comparisons false, so the
#   strict test reports ROBUST. This is not guarded.
#
# Standard import pattern:
#   from antifragile.core.convexity import classify, classify_with_tolerance

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic

from antifragile.core.contract import P, twin_of
from antifragile.core.triad import Triad


# ---------------------------------------------------------------------------
# SAMPLE RECORD
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConvexitySample(Generic[P]):
    """
    The three evaluated outcomes and the two compared quantities.

    Fields
    ------
    f_minus : payoff(at - delta)
    f_x     : payoff(at)
    f_plus  : payoff(at + delta)
    total   : f_plus + f_minus
    twin    : twin(f_x)
    """
    f_minus: P
    f_x:     P
    f_plus:  P
    total:   P
    twin:    P


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------

def absolute_difference(a: Any, b: Any) -> Any:
    """
    |a - b| using only ordering and subtraction.

    The larger operand minus the smaller, so payoff types without abs()
    are supported.
    """
    if a >= b:
        return a - b
    return b - a


def sample_convexity(system: Any, at: Any, delta: Any) -> ConvexitySample:
    """
    Evaluate the system at at - delta, at, at + delta.

    Parameters
    ----------
    system : any object with payoff(stressor); twin() is used if present.
    at     : operating point.
    delta  : perturbation size.

    Returns
    -------
    ConvexitySample
    """
    f_minus = system.payoff(at - delta)
    f_x = system.payoff(at)
    f_plus = system.payoff(at + delta)
    return ConvexitySample(
        f_minus=f_minus,
        f_x=f_x,
        f_plus=f_plus,
        total=f_plus + f_minus,
        twin=twin_of(system, f_x),
    )


# ---------------------------------------------------------------------------
# STRICT TEST
# ---------------------------------------------------------------------------

def classify(system: Any, at: Any, delta: Any) -> Triad:
    """
    Classify a system at an operating point with exact comparison.

    Floating-point payoffs rarely tie exactly; nearly linear systems are
    better served by classify_with_tolerance().

    Parameters
    ----------
    system : any object with payoff(stressor).
    at     : operating point (stress level).
    delta  : perturbation size. delta == 0 always yields ROBUST.

    Returns
    -------
    Triad

    Notes
    -----
    Total for well-typed input. Never raises on its own account; exceptions
    raised by the system's payoff() propagate unchanged.
    """
    sample = sample_convexity(system, at, delta)
    if sample.total > sample.twin:
        return Triad.ANTIFRAGILE
    if sample.total < sample.twin:
        return Triad.FRAGILE
    return Triad.ROBUST


# ---------------------------------------------------------------------------
# TOLERANCE-AWARE TEST
# ---------------------------------------------------------------------------

def classify_with_tolerance(system: Any, at: Any, delta: Any, epsilon: Any) -> Triad:
    """
    Classify with a tolerance band around linear.

    |total - twin| <= epsilon -> ROBUST
    else total > twin         -> ANTIFRAGILE
    else                      -> FRAGILE

    Parameters
    ----------
    system  : any object with payoff(stressor).
    at      : operating point.
    delta   : perturbation size.
    epsilon : non-negative tolerance in payoff units. A negative epsilon is
              a caller error and is not checked. No difference then falls
              inside the band: an exact tie classifies as FRAGILE and every
              other result matches the strict test.

    Returns
    -------
    Triad

    Notes
    -----
    The tolerance only ever demotes a result to ROBUST. It never moves the
    boundary between FRAGILE and ANTIFRAGILE.
    """
    sample = sample_convexity(system, at, delta)
    diff = absolute_difference(sample.total, sample.twin)
    if diff <= epsilon:
        return Triad.ROBUST
    if sample.total > sample.twin:
        return Triad.ANTIFRAGILE
    return Triad.FRAGILE


__all__ = [
    "ConvexitySample",
    "absolute_difference",
    "sample_convexity",
    "classify",
    "classify_with_tolerance",
]
