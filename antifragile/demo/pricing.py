# antifragile/demo/pricing.py
# Product pricing for the adaptive pricing demo.
#
# calculate_price() is a pure function of the query. The demo service adds
# a simulated computation delay (computation_delay_seconds) around it so
# that caching has something to save; the delay is not applied here.
#
# Standard import pattern:
#   from antifragile.demo.pricing import PriceQuery, PriceResult, calculate_price

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from antifragile.utils.constants import (
    BASE_PRICES,
    BULK_DISCOUNT_RATE,
    COMPUTATION_DELAY_BASE_MS,
    COMPUTATION_DELAY_SPREAD_MS,
    DEFAULT_BASE_PRICE,
    OPTION_COSTS,
    QUANTITY_DISCOUNT_TIERS,
)


# ---------------------------------------------------------------------------
# DATA CLASSES
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PriceQuery:
    """
    A product configuration. Hashable; used as the cache key.

    options keeps caller order. Use normalized() before caching so that
    the same options in a different order share one cache entry.
    """
    product_id: str
    quantity: int
    options: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    def normalized(self) -> "PriceQuery":
        """Same query with options sorted."""
        return PriceQuery(
            product_id=self.product_id,
            quantity=self.quantity,
            options=tuple(sorted(self.options)),
        )


@dataclass(frozen=True)
class PriceResult:
    base_price: float
    quantity_discount: float
    options_cost: float
    total_price: float


# ---------------------------------------------------------------------------
# PRICING RULES
# ---------------------------------------------------------------------------

def get_base_price(product_id: str) -> float:
    return BASE_PRICES.get(product_id, DEFAULT_BASE_PRICE)


def calculate_quantity_discount(quantity: int) -> float:
    """Volume discount rate for a quantity."""
    for upper, rate in QUANTITY_DISCOUNT_TIERS:
        if quantity <= upper:
            return rate
    return BULK_DISCOUNT_RATE


def calculate_options_cost(options: Iterable[str], base_price: float) -> float:
    """Per-unit cost of the selected options. Unknown options cost nothing."""
    cost = 0.0
    for option in options:
        flat, fraction = OPTION_COSTS.get(option, (0.0, 0.0))
        cost += flat + base_price * fraction
    return cost


def calculate_price(query: PriceQuery) -> PriceResult:
    """
    Price a query.

    subtotal = base_price * quantity
    discount = subtotal * discount_rate(quantity)
    options  = options_cost(per unit) * quantity
    total    = subtotal - discount + options, rounded to cents
    """
    base_price = get_base_price(query.product_id)
    subtotal = base_price * query.quantity

    quantity_discount = subtotal * calculate_quantity_discount(query.quantity)
    options_cost = calculate_options_cost(query.options, base_price) * query.quantity

    total_price = subtotal - quantity_discount + options_cost

    return PriceResult(
        base_price=base_price,
        quantity_discount=quantity_discount,
        options_cost=options_cost,
        total_price=round(total_price * 100.0) / 100.0,
    )


def computation_delay_seconds(query: PriceQuery) -> float:
    """Simulated cost of an uncached pricing call: 5-14 ms."""
    millis = COMPUTATION_DELAY_BASE_MS + len(query.product_id) % COMPUTATION_DELAY_SPREAD_MS
    return millis / 1000.0


__all__ = [
    "PriceQuery",
    "PriceResult",
    "get_base_price",
    "calculate_quantity_discount",
    "calculate_options_cost",
    "calculate_price",
    "computation_delay_seconds",
]
