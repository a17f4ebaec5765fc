# antifragile/demo/__init__.py
# Adaptive pricing service: a live system that feeds the classification
# engine its own load, hit rate and response time.
#
# Requires the service extras (fastapi, uvicorn). pricing, cache and
# metrics import without them; service does not.

from antifragile.demo.pricing import PriceQuery, PriceResult, calculate_price
from antifragile.demo.cache import AdaptiveCache, CacheStats
from antifragile.demo.metrics import (
    HistoryEntry,
    ServiceMetrics,
    ServiceSnapshot,
    ServiceStats,
)
