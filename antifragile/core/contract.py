# antifragile/core/contract.py
# Outcome function contract.
#
# Any entity can be classified as long as it exposes payoff(stressor).
# The entity type itself is unconstrained; only the stressor and payoff
# value types matter:
#
#   Stressor -- supports +, - (the engine computes at + delta, at - delta).
#   Payoff   -- supports + and ordering comparison. A partial order is
#               enough; NaN-bearing floats are accepted and simply give
#               unordered comparisons.
#
# twin(value) doubles a payoff. The default is value + value; entities with
# a cheaper or more precise doubling path override it.
#
# The engine assumes payoff() is pure and deterministic. Entities may have
# side effects but repeatability of a classification is then not
# guaranteed. Entities classified from several threads must make payoff()
# safe for concurrent reads; the engine takes no locks.
#
# Standard import pattern:
#   from antifragile.core.contract import Antifragile, SupportsPayoff, twin_of

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable


S = TypeVar("S")   # stressor
P = TypeVar("P")   # payoff


@runtime_checkable
class SupportsPayoff(Protocol):
    """Structural form of the contract: anything with payoff(stressor)."""

    def payoff(self, stressor: Any) -> Any:
        ...


class Antifragile(ABC, Generic[S, P]):
    """
    Nominal base class for classifiable systems.

    Subclasses implement payoff(). twin() may be overridden.
    Subclass TriadAnalysis instead to also get the classification methods.
    """

    @abstractmethod
    def payoff(self, stressor: S) -> P:
        """Outcome produced by the system under the given stress."""

    def twin(self, value: P) -> P:
        """Return value + value."""
        return value + value


def twin_of(system: Any, value: Any) -> Any:
    """
    Double a payoff using the system's own twin() when it has one.

    Duck-typed systems without twin() fall back to value + value.
    """
    twin = getattr(system, "twin", None)
    if twin is None:
        return value + value
    return twin(value)


__all__ = ["Antifragile", "SupportsPayoff", "twin_of", "S", "P"]
