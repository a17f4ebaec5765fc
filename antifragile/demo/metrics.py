# antifragile/demo/metrics.py
# Service metrics and the service's own payoff model.
#
# ServiceMetrics counts requests, cache hits and misses, and cumulative
# response time. Every HISTORY_RECORD_INTERVAL requests it classifies the
# service at its current load and appends a HistoryEntry; each entry is
# also logged as a CLASSIFICATION event. events() reads the log back for
# GET /events.
#
# ServiceSnapshot is a frozen view of those counters that implements the
# payoff contract:
#
#   stressor : normalized load (requests per second / LOAD_NORMALIZATION)
#   payoff   : effective throughput capacity
#
#   payoff(load) = base_throughput * (1 + hit_rate) * max(|load|, MIN_LOAD) ** exponent
#   exponent     = EXPONENT_BASE + EXPONENT_HIT_RATE_GAIN * hit_rate   (1.1 .. 1.5)
#
# The exponent is always > 1, so the curve is convex at any operating point
# away from the MIN_LOAD clamp. A hotter cache steepens it.
#
# Thread safety: counters and history share one lock. Request handlers run
# in a worker thread pool.

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

import numpy as np

from antifragile.core.analysis import TriadAnalysis
from antifragile.core.logging_layer import Event, EventFilter, EventLogger
from antifragile.core.triad import Triad
from antifragile.utils.constants import (
    ASSUMED_HIT_RATE,
    CURVE_DEFAULT_POINTS,
    CURVE_LOAD_RANGE,
    EVENT_LOG_MAX_EVENTS,
    EXPONENT_BASE,
    EXPONENT_HIT_RATE_GAIN,
    HISTORY_DRAIN_COUNT,
    HISTORY_MAX_ENTRIES,
    HISTORY_RECORD_INTERVAL,
    LOAD_DELTA,
    LOAD_FLOOR,
    LOAD_NORMALIZATION,
    MAX_BASE_THROUGHPUT,
    MIN_LOAD,
    MIN_RESPONSE_TIME_MS,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalized_load(requests_per_second: float) -> float:
    """Operating point for a request rate: max(rps / 100, 0.1)."""
    return max(requests_per_second / LOAD_NORMALIZATION, LOAD_FLOOR)


# ---------------------------------------------------------------------------
# RECORDS
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServiceStats:
    total_requests: int
    cache_hits: int
    cache_misses: int
    cache_hit_rate: float
    avg_response_time_ms: float
    requests_per_second: float


@dataclass(frozen=True)
class HistoryEntry:
    """One periodic classification of the running service."""
    timestamp: datetime
    total_requests: int
    cache_hit_rate: float
    avg_response_time_ms: float
    classification: Triad


# ---------------------------------------------------------------------------
# PAYOFF MODEL
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServiceSnapshot(TriadAnalysis[float, float]):
    """Point-in-time counters, classifiable by load."""
    total_requests: int
    cache_hits: int
    cache_misses: int
    avg_response_time_ms: float

    @classmethod
    def from_stats(cls, stats: ServiceStats) -> "ServiceSnapshot":
        return cls(
            total_requests=stats.total_requests,
            cache_hits=stats.cache_hits,
            cache_misses=stats.cache_misses,
            avg_response_time_ms=stats.avg_response_time_ms,
        )

    def hit_rate(self) -> float:
        """Observed hit rate; ASSUMED_HIT_RATE before any request."""
        if self.total_requests > 0:
            return self.cache_hits / self.total_requests
        return ASSUMED_HIT_RATE

    def base_throughput(self) -> float:
        """Requests per second one worker sustains at the mean response time."""
        if self.avg_response_time_ms > MIN_RESPONSE_TIME_MS:
            return 1000.0 / self.avg_response_time_ms
        return MAX_BASE_THROUGHPUT

    def exponent(self) -> float:
        return EXPONENT_BASE + self.hit_rate() * EXPONENT_HIT_RATE_GAIN

    def payoff(self, stressor: float) -> float:
        load = max(abs(stressor), MIN_LOAD)
        hit_rate = self.hit_rate()
        return self.base_throughput() * (1.0 + hit_rate) * load ** self.exponent()

    def current_classification(self, requests_per_second: float) -> Triad:
        """Classify at the operating point implied by a request rate."""
        return self.classify(normalized_load(requests_per_second), LOAD_DELTA)

    def curve_data(self, points: int = CURVE_DEFAULT_POINTS) -> List[Tuple[float, float]]:
        """
        (load, payoff) pairs on an even grid over CURVE_LOAD_RANGE.

        Raises
        ------
        ValueError : If points < 2.
        """
        if isinstance(points, bool) or not isinstance(points, int) or points < 2:
            raise ValueError("curve_data: points must be an int >= 2; got: " + repr(points))
        low, high = CURVE_LOAD_RANGE
        loads = np.linspace(low, high, points)
        return [(float(load), float(self.payoff(float(load)))) for load in loads]


# ---------------------------------------------------------------------------
# COLLECTOR
# ---------------------------------------------------------------------------

class ServiceMetrics:
    """
    Request counters plus periodic self-classification.

    Parameters
    ----------
    event_logger : Receives one CLASSIFICATION event per history entry.
                   A bounded logger is created when omitted.
    clock        : Monotonic seconds; used for requests per second.
    wall_clock   : Timestamps for history entries and events.
    """

    def __init__(
        self,
        event_logger: Optional[EventLogger] = None,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self._wall_clock = wall_clock
        self._started_at: float = clock()

        self._total_requests: int = 0
        self._cache_hits: int = 0
        self._cache_misses: int = 0
        self._total_response_time_s: float = 0.0

        self._history: List[HistoryEntry] = []
        self.event_logger: EventLogger = (
            event_logger if event_logger is not None
            else EventLogger(max_events=EVENT_LOG_MAX_EVENTS)
        )

    def record_cache_hit(self) -> None:
        with self._lock:
            self._cache_hits += 1

    def record_cache_miss(self) -> None:
        with self._lock:
            self._cache_misses += 1

    def record_request(self, duration_seconds: float) -> None:
        """Count one finished request. Every HISTORY_RECORD_INTERVAL-th adds history."""
        with self._lock:
            self._total_requests += 1
            self._total_response_time_s += duration_seconds
            if self._total_requests % HISTORY_RECORD_INTERVAL == 0:
                self._record_history_locked()

    def get_stats(self) -> ServiceStats:
        with self._lock:
            return self._stats_locked()

    def _stats_locked(self) -> ServiceStats:
        total = self._total_requests
        if total > 0:
            hit_rate = self._cache_hits / total
            avg_ms = self._total_response_time_s / total * 1000.0
        else:
            hit_rate = 0.0
            avg_ms = 0.0

        elapsed = self._clock() - self._started_at
        rps = total / elapsed if elapsed > 0 else 0.0

        return ServiceStats(
            total_requests=total,
            cache_hits=self._cache_hits,
            cache_misses=self._cache_misses,
            cache_hit_rate=hit_rate,
            avg_response_time_ms=avg_ms,
            requests_per_second=rps,
        )

    def snapshot(self) -> ServiceSnapshot:
        return ServiceSnapshot.from_stats(self.get_stats())

    def _record_history_locked(self) -> None:
        stats = self._stats_locked()
        snapshot = ServiceSnapshot.from_stats(stats)
        at = normalized_load(stats.requests_per_second)
        classification = snapshot.classify(at, LOAD_DELTA)
        timestamp = self._wall_clock()

        self._history.append(
            HistoryEntry(
                timestamp=timestamp,
                total_requests=stats.total_requests,
                cache_hit_rate=stats.cache_hit_rate,
                avg_response_time_ms=stats.avg_response_time_ms,
                classification=classification,
            )
        )
        if len(self._history) > HISTORY_MAX_ENTRIES:
            del self._history[:HISTORY_DRAIN_COUNT]

        self.event_logger.log_classification(
            classification,
            at,
            LOAD_DELTA,
            timestamp,
            total_requests=stats.total_requests,
            cache_hit_rate=stats.cache_hit_rate,
        )

    def get_history(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._history)

    # The event logger is not thread safe; every write goes through the lock.

    def record_rejection(self, reason: str, **context) -> str:
        """Log a REQUEST_REJECTED event. Returns the event id."""
        data = {"reason": reason}
        data.update(context)
        with self._lock:
            return self.event_logger.log_event("REQUEST_REJECTED", data, self._wall_clock())

    def record_cleanup(self, removed: int, remaining: int) -> str:
        """Log a CACHE_CLEANUP event. Returns the event id."""
        data = {"removed": removed, "remaining": remaining}
        with self._lock:
            return self.event_logger.log_event("CACHE_CLEANUP", data, self._wall_clock())

    def events(
        self,
        event_type: Optional[str] = None,
        since: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> Tuple[List[Event], int]:
        """
        Stored events, oldest first, and the number ever logged.

        A naive since is taken as UTC; event timestamps are UTC-aware.
        """
        if since is not None and since.tzinfo is None:
            since = since.replace(tzinfo=timezone.utc)
        event_filter = EventFilter(event_type=event_type, start_time=since, limit=limit)
        with self._lock:
            return (
                self.event_logger.query_events(event_filter),
                self.event_logger.total_logged(),
            )


__all__ = [
    "ServiceStats",
    "HistoryEntry",
    "ServiceSnapshot",
    "ServiceMetrics",
    "normalized_load",
]
