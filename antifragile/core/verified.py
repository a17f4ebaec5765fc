# antifragile/core/verified.py
# Verified -- a system paired with a previously computed classification.
#
# LIFECYCLE:
#   Created only by Verified.check() (or by the record loader when a
#   serialized Verified is restored). Direct construction raises TypeError.
#   The wrapper owns the system for its lifetime; callers must not keep
#   mutable aliases of a wrapped system.
#
# MUTATION:
#   The stored classification changes only through re_verify(). Attribute
#   assignment on the wrapper raises AttributeError. still_holds() never
#   mutates.
#
# DELEGATION:
#   Attributes not defined on the wrapper are read from the wrapped system,
#   so system-specific behaviour is reachable without unwrapping
#   (verified.payoff(5.0)). Delegation is read-only.
#
# No background state. No logging. No I/O.
#
# Standard import pattern:
#   from antifragile.core.verified import Verified

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from antifragile.core.convexity import classify
from antifragile.core.triad import Triad


T = TypeVar("T")

# Construction token; only check() and _restore() hold it.
_CONSTRUCT = object()


class Verified(Generic[T]):
    """
    Immutable pairing of a system with its Triad classification.

        verified = Verified.check(system, 10.0, 1.0)
        verified.classification      # cached, no recomputation
        verified.still_holds(20.0, 1.0)
        verified.re_verify(20.0, 1.0)
    """

    __slots__ = ("_inner", "_classification")

    def __init__(self, inner: T, classification: Triad, _token: object = None) -> None:
        if _token is not _CONSTRUCT:
            raise TypeError(
                "Verified instances are created with Verified.check()"
            )
        if not isinstance(classification, Triad):
            raise TypeError(
                "Verified: classification must be a Triad member; got: "
                + repr(classification)
            )
        object.__setattr__(self, "_inner", inner)
        object.__setattr__(self, "_classification", classification)

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def check(cls, system: T, at: Any, delta: Any) -> "Verified[T]":
        """
        Classify system at (at, delta) with the strict test and wrap it.

        Never fails for well-typed input; exceptions from the system's
        payoff() propagate unchanged.
        """
        return cls(system, classify(system, at, delta), _CONSTRUCT)

    @classmethod
    def _restore(cls, system: T, classification: Triad) -> "Verified[T]":
        """Rebuild a previously serialized wrapper without re-running the test."""
        return cls(system, classification, _CONSTRUCT)

    # -----------------------------------------------------------------------
    # Stored classification
    # -----------------------------------------------------------------------

    @property
    def classification(self) -> Triad:
        return self._classification

    @property
    def inner(self) -> T:
        return self._inner

    def into_inner(self) -> T:
        """Release the wrapped system. The wrapper should be discarded."""
        return self._inner

    def is_antifragile(self) -> bool:
        return self._classification.is_antifragile()

    def is_fragile(self) -> bool:
        return self._classification.is_fragile()

    def is_robust(self) -> bool:
        return self._classification.is_robust()

    # -----------------------------------------------------------------------
    # Re-validation
    # -----------------------------------------------------------------------

    def re_verify(self, at: Any, delta: Any) -> Triad:
        """
        Re-run the strict test at (at, delta) and overwrite the stored
        classification. The wrapped system is not touched.

        Returns the new classification.
        """
        classification = classify(self._inner, at, delta)
        object.__setattr__(self, "_classification", classification)
        return classification

    def still_holds(self, at: Any, delta: Any) -> bool:
        """
        True when classifying at (at, delta) gives the stored classification.

        Detects drift without committing to it: the stored value is
        unchanged either way.
        """
        return classify(self._inner, at, delta) is self._classification

    # -----------------------------------------------------------------------
    # Delegation and value semantics
    # -----------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails. Private names are never
        # delegated, which also keeps unpickling from recursing before
        # the slots are populated.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            "Verified is immutable; use re_verify() to update the classification"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Verified is immutable")

    # Copies and pickles rebuild through _restore(); the stored
    # classification is carried over, not recomputed.

    def __copy__(self) -> "Verified[T]":
        return Verified._restore(self._inner, self._classification)

    def __deepcopy__(self, memo: dict) -> "Verified[T]":
        return Verified._restore(copy.deepcopy(self._inner, memo), self._classification)

    def __reduce__(self):
        return (Verified._restore, (self._inner, self._classification))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Verified):
            return NotImplemented
        return (
            self._classification is other._classification
            and self._inner == other._inner
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            "Verified(inner=" + repr(self._inner)
            + ", classification=" + self._classification.name
            + ")"
        )


__all__ = ["Verified"]
