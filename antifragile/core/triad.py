# antifragile/core/triad.py
# SINGLE AUTHORITATIVE CLASSIFICATION TYPE.
#
# Every classification produced or consumed anywhere in the package is a
# Triad member imported from this file. No other module may define
# classification strings, rank tables, or opposite mappings.
#
# ORDERING CONTRACT:
#   FRAGILE < ROBUST < ANTIFRAGILE, by desirability.
#   rank() is a bijection onto {0, 1, 2} and is the only ordering key.
#   Sorting any collection of Triad members yields
#   FRAGILE, ROBUST, ANTIFRAGILE regardless of insertion order.
#
# WIRE CONTRACT:
#   The canonical wire forms are the rank (int) and the lowercase token
#   (Triad.value). Both round-trip exactly through from_byte() / parse().
#
# Standard import pattern:
#   from antifragile.core.triad import Triad, TRIAD_ALL

from __future__ import annotations

import operator
from enum import Enum, unique
from typing import Any, Dict, Iterator, Tuple

from antifragile.core.exceptions import InvalidTriadValue, ParseTriadError


# ---------------------------------------------------------------------------
# RANK AND DESCRIPTION TABLES (keyed by canonical token)
# ---------------------------------------------------------------------------

_RANK_BY_TOKEN: Dict[str, int] = {
    "fragile":     0,
    "robust":      1,
    "antifragile": 2,
}

_DESCRIPTION_BY_TOKEN: Dict[str, str] = {
    "fragile":     "Fragile (harmed by volatility)",
    "robust":      "Robust (unaffected by volatility)",
    "antifragile": "Antifragile (benefits from volatility)",
}


# ---------------------------------------------------------------------------
# CANONICAL ENUM DEFINITION
# ---------------------------------------------------------------------------

@unique
class Triad(Enum):
    """
    The three categories of response to volatility.

    FRAGILE     -- harmed by volatility (concave response); rank 0.
    ROBUST      -- unaffected by volatility (linear response); rank 1.
                   Neutral default.
    ANTIFRAGILE -- benefits from volatility (convex response); rank 2.

    Member values are the canonical lowercase tokens, so Triad("robust")
    is the exact-match lookup and Triad.parse() the case-insensitive one.
    """
    FRAGILE     = "fragile"
    ROBUST      = "robust"
    ANTIFRAGILE = "antifragile"

    # -----------------------------------------------------------------------
    # Rank and predicates
    # -----------------------------------------------------------------------

    def rank(self) -> int:
        """Desirability rank: FRAGILE=0, ROBUST=1, ANTIFRAGILE=2."""
        return _RANK_BY_TOKEN[self.value]

    def is_antifragile(self) -> bool:
        return self is Triad.ANTIFRAGILE

    def is_fragile(self) -> bool:
        return self is Triad.FRAGILE

    def is_robust(self) -> bool:
        return self is Triad.ROBUST

    def opposite(self) -> "Triad":
        """
        ANTIFRAGILE <-> FRAGILE. ROBUST is its own opposite.

        Involutive: x.opposite().opposite() is x for every member.
        """
        if self is Triad.ANTIFRAGILE:
            return Triad.FRAGILE
        if self is Triad.FRAGILE:
            return Triad.ANTIFRAGILE
        return Triad.ROBUST

    # -----------------------------------------------------------------------
    # Conversions
    # -----------------------------------------------------------------------

    def to_byte(self) -> int:
        """Exact rank as an unsigned byte value."""
        return self.rank()

    def __int__(self) -> int:
        return self.rank()

    def as_str(self) -> str:
        """Canonical lowercase token ("fragile", "robust", "antifragile")."""
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTION_BY_TOKEN[self.value]

    def __str__(self) -> str:
        return self.description

    @classmethod
    def from_byte(cls, value: Any) -> "Triad":
        """
        Inverse of to_byte().

        Raises
        ------
        InvalidTriadValue
            For any value other than the integers 0, 1, 2. Integer-like
            values (numpy integers, anything with __index__) are accepted;
            bool is rejected even though it subclasses int.
        """
        if isinstance(value, bool):
            raise InvalidTriadValue(value)
        try:
            index = operator.index(value)
        except TypeError:
            raise InvalidTriadValue(value) from None
        for member in cls:
            if member.rank() == index:
                return member
        raise InvalidTriadValue(value)

    @classmethod
    def parse(cls, text: Any) -> "Triad":
        """
        Case-insensitive ASCII match against the three canonical tokens.

        Raises
        ------
        ParseTriadError
            For anything else, including non-str input and surrounding
            whitespace. The error does not echo the input.
        """
        if isinstance(text, str) and text.isascii():
            token = text.lower()
            if token in _RANK_BY_TOKEN:
                return cls(token)
        raise ParseTriadError()

    @classmethod
    def default(cls) -> "Triad":
        """ROBUST, the neutral midpoint."""
        return cls.ROBUST

    @classmethod
    def iter(cls) -> Iterator["Triad"]:
        """All members in rank order."""
        return iter(TRIAD_ALL)

    # -----------------------------------------------------------------------
    # Ordering (by rank only)
    # -----------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Triad):
            return NotImplemented
        return self.rank() < other.rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Triad):
            return NotImplemented
        return self.rank() <= other.rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Triad):
            return NotImplemented
        return self.rank() > other.rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Triad):
            return NotImplemented
        return self.rank() >= other.rank()

    def __hash__(self) -> int:
        return hash(self.rank())


# All members in desirability order: (FRAGILE, ROBUST, ANTIFRAGILE).
TRIAD_ALL: Tuple[Triad, ...] = (Triad.FRAGILE, Triad.ROBUST, Triad.ANTIFRAGILE)


__all__ = ["Triad", "TRIAD_ALL"]
