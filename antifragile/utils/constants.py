# antifragile/utils/constants.py
# Version: 0.1.0
# Single source of numeric configuration for the package.
# Values here are read-only at runtime; callers override them through
# function and constructor parameters, never by rebinding module globals.
#
# Standard import pattern:
#   from antifragile.utils.constants import (
#       DEFAULT_TOLERANCE,
#       CACHE_DEFAULT_TTL_SECONDS,
#       CACHE_DEFAULT_MAX_CAPACITY,
#       HISTORY_RECORD_INTERVAL,
#       BASE_PRICES,
#   )

from typing import Dict, Tuple


# ---------------------------------------------------------------------------
# CLASSIFICATION DEFAULTS
# ---------------------------------------------------------------------------

DEFAULT_TOLERANCE: float = 1e-9     # epsilon for classify_with_tolerance on f64 payoffs

# Operating point used by the demo service when classifying its own load.
# at = max(requests_per_second / LOAD_NORMALIZATION, LOAD_FLOOR), delta fixed.
LOAD_NORMALIZATION: float = 100.0
LOAD_FLOOR:         float = 0.1
LOAD_DELTA:         float = 0.1


# ---------------------------------------------------------------------------
# SERVICE SNAPSHOT PAYOFF MODEL
# ---------------------------------------------------------------------------
# payoff(load) = base_throughput * (1 + hit_rate) * load ** exponent
#   base_throughput = 1000 / avg_response_time_ms   (capped when avg ~ 0)
#   exponent        = EXPONENT_BASE + hit_rate * EXPONENT_HIT_RATE_GAIN

MIN_LOAD:                  float = 0.001    # load clamp for continuity at 0
MIN_RESPONSE_TIME_MS:      float = 0.001
MAX_BASE_THROUGHPUT:       float = 10_000.0
ASSUMED_HIT_RATE:          float = 0.5      # before any request is seen
EXPONENT_BASE:             float = 1.1
EXPONENT_HIT_RATE_GAIN:    float = 0.4
CURVE_LOAD_RANGE: Tuple[float, float] = (0.1, 2.0)
CURVE_DEFAULT_POINTS:      int   = 20


# ---------------------------------------------------------------------------
# ADAPTIVE CACHE
# ---------------------------------------------------------------------------

CACHE_DEFAULT_TTL_SECONDS:     float = 300.0
CACHE_DEFAULT_MAX_CAPACITY:    int   = 10_000
CACHE_CLEANUP_INTERVAL_SECONDS: float = 60.0


# ---------------------------------------------------------------------------
# METRICS HISTORY
# ---------------------------------------------------------------------------

HISTORY_RECORD_INTERVAL: int = 100      # one history entry per N requests
HISTORY_MAX_ENTRIES:     int = 1000
HISTORY_DRAIN_COUNT:     int = 100      # oldest entries dropped past the max
EVENT_LOG_MAX_EVENTS:    int = 10_000
EVENTS_DEFAULT_LIMIT:    int = 100


# ---------------------------------------------------------------------------
# REQUEST LIMITS (POST /price)
# ---------------------------------------------------------------------------

MAX_QUANTITY:          int = 100_000
MAX_PRODUCT_ID_LENGTH: int = 128
MAX_OPTIONS:           int = 20


# ---------------------------------------------------------------------------
# PRICING TABLES
# ---------------------------------------------------------------------------

BASE_PRICES: Dict[str, float] = {
    "widget-001":  10.00,
    "widget-002":  15.00,
    "gadget-001":  25.00,
    "gadget-002":  35.00,
    "premium-001": 100.00,
    "premium-002": 150.00,
}
DEFAULT_BASE_PRICE: float = 20.00

# (upper quantity bound inclusive, discount rate); above the last bound
# BULK_DISCOUNT_RATE applies.
QUANTITY_DISCOUNT_TIERS: Tuple[Tuple[int, float], ...] = (
    (10,  0.00),
    (50,  0.05),
    (100, 0.10),
    (500, 0.15),
)
BULK_DISCOUNT_RATE: float = 0.20

# option -> (flat cost, fraction of base price)
OPTION_COSTS: Dict[str, Tuple[float, float]] = {
    "express-shipping":  (5.00,  0.02),
    "gift-wrap":         (3.00,  0.00),
    "insurance":         (0.00,  0.05),
    "priority-support":  (10.00, 0.00),
    "extended-warranty": (0.00,  0.15),
}

# Simulated computation cost: (BASE + len(product_id) % SPREAD) milliseconds.
COMPUTATION_DELAY_BASE_MS:   int = 5
COMPUTATION_DELAY_SPREAD_MS: int = 10

CURRENCY: str = "USD"


# ---------------------------------------------------------------------------
# SERIALIZED RECORD FORMAT
# ---------------------------------------------------------------------------

STORAGE_FORMAT_VERSION: str = "1.0.0"
