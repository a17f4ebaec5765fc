# antifragile/demo/cache.py
# Adaptive cache for pricing results.
#
# A bounded TTL store: entries expire after ttl_seconds, and the store never
# holds more than max_capacity entries after an insert completes.
# Under low load few queries repeat and most requests are computed; under
# high load popular queries are served from here, which is what makes the
# demo service improve with stress.
#
# Eviction on insert at capacity:
#   1. cleanup()       -- drop every expired entry.
#   2. evict oldest    -- if still at capacity, drop the entry with the
#                         earliest creation time.
#
# The clock is injectable (defaults to time.monotonic) so expiry is
# testable without sleeping. All public methods take an internal lock;
# the cache is shared between request handlers and the cleanup task.

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from antifragile.demo.pricing import PriceQuery, PriceResult
from antifragile.utils.constants import (
    CACHE_DEFAULT_MAX_CAPACITY,
    CACHE_DEFAULT_TTL_SECONDS,
)


@dataclass
class _CacheEntry:
    result: PriceResult
    created_at: float
    hit_count: int = 0


@dataclass(frozen=True)
class CacheStats:
    entries: int
    total_hits: int


class AdaptiveCache:
    """
    Bounded TTL cache keyed by PriceQuery.

    Parameters
    ----------
    ttl_seconds  : Lifetime of an entry. Must be > 0.
    max_capacity : Entry ceiling. Must be >= 1.
    clock        : Zero-argument callable returning seconds as float.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_DEFAULT_TTL_SECONDS,
        max_capacity: int = CACHE_DEFAULT_MAX_CAPACITY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not ttl_seconds > 0:
            raise ValueError("ttl_seconds must be > 0; got: " + repr(ttl_seconds))
        if isinstance(max_capacity, bool) or not isinstance(max_capacity, int) or max_capacity < 1:
            raise ValueError("max_capacity must be an int >= 1; got: " + repr(max_capacity))
        self._entries: Dict[PriceQuery, _CacheEntry] = {}
        self._ttl: float = float(ttl_seconds)
        self._max_capacity: int = max_capacity
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    def _expired(self, entry: _CacheEntry, now: float) -> bool:
        return now - entry.created_at >= self._ttl

    def get(self, query: PriceQuery) -> Optional[PriceResult]:
        """Cached result if present and unexpired; expired entries are dropped."""
        with self._lock:
            entry = self._entries.get(query)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                del self._entries[query]
                return None
            entry.hit_count += 1
            return entry.result

    def insert(self, query: PriceQuery, result: PriceResult) -> None:
        """Store result, evicting expired then oldest entries when full."""
        with self._lock:
            if query not in self._entries and len(self._entries) >= self._max_capacity:
                self._cleanup_locked()
                if len(self._entries) >= self._max_capacity:
                    self._evict_oldest_locked()
            self._entries[query] = _CacheEntry(result=result, created_at=self._clock())

    def cleanup(self) -> int:
        """Drop every expired entry. Returns the number removed."""
        with self._lock:
            return self._cleanup_locked()

    def _cleanup_locked(self) -> int:
        now = self._clock()
        expired = [q for q, e in self._entries.items() if self._expired(e, now)]
        for query in expired:
            del self._entries[query]
        return len(expired)

    def _evict_oldest_locked(self) -> None:
        if not self._entries:
            return
        oldest = min(self._entries, key=lambda q: self._entries[q].created_at)
        del self._entries[oldest]

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                entries=len(self._entries),
                total_hits=sum(e.hit_count for e in self._entries.values()),
            )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["AdaptiveCache", "CacheStats"]
