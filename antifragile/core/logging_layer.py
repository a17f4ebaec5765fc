# antifragile/core/logging_layer.py
# Event-sourced logging for processes that host the classification engine.
#
# The classification core (contract, convexity, analysis, triad, verified)
# never logs. Host processes such as the demo pricing service record what
# they observe here: rejected requests, periodic classifications, cache
# maintenance.
#
# Scope: in-memory event store, deterministic ids and hashes.
# No file IO. No global mutable state. All timestamps are caller-supplied.
#
# Canonical import:
#   from antifragile.core.logging_layer import EventLogger, Event, EventFilter
#
# Prohibited: datetime.now(), uuid, random, file IO, global mutable state

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import hashlib
import math
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Deque, Dict, Iterator, List, Optional

# ===========================================================================
# SECTION 2 -- CONSTANTS
# ===========================================================================

# Logged in place of non-finite floats; the event is never dropped.
_NAN_SENTINEL: str = "NaN_DETECTED"
_INF_SENTINEL: str = "Inf_DETECTED"

# Field separator inside the hash preimage.
_HASH_SEP: str = "|"

# ===========================================================================
# SECTION 3 -- DATACLASSES: Event, EventFilter
# ===========================================================================

@dataclass(frozen=True)
class Event:
    """
    Immutable record of a single event.

    Fields
    ------
    id        : Deterministic identifier derived from the logger's counter.
    type      : Category string (REQUEST_REJECTED, CLASSIFICATION, ...).
    timestamp : Caller-supplied datetime. Never generated internally.
    data      : Sanitized key-value payload. NaN/Inf replaced with sentinels.
    hash      : SHA-256 hex digest over (id, type, timestamp, data).
    """
    id: str
    type: str
    timestamp: datetime
    data: Dict[str, Any]
    hash: str


@dataclass
class EventFilter:
    """
    Filter for EventLogger.query_events(). Omitted fields apply no constraint.

    Fields
    ------
    event_type : Only events whose .type equals this value.
    start_time : Only events with timestamp >= start_time.
    end_time   : Only events with timestamp <= end_time.
    limit      : At most this many events, oldest first.
    """
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 4 -- INTERNAL HELPERS
# ===========================================================================

def _sanitize_numeric(value: Any) -> Any:
    """Replace float NaN or Inf with the matching sentinel string."""
    if isinstance(value, float):
        if math.isnan(value):
            return _NAN_SENTINEL
        if math.isinf(value):
            return _INF_SENTINEL
    return value


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """New dict with every float value passed through _sanitize_numeric()."""
    return {k: _sanitize_numeric(v) for k, v in data.items()}


def _compute_hash(
    event_id: str,
    event_type: str,
    timestamp: datetime,
    data: Dict[str, Any],
) -> str:
    """
    Deterministic SHA-256 hex digest for an event.

    Preimage: id | type | timestamp.isoformat() | repr(sorted(data.items()))
    The sorted repr makes the digest independent of dict insertion order.
    """
    sorted_items: str = repr(sorted(data.items()))
    preimage: str = (
        event_id
        + _HASH_SEP
        + event_type
        + _HASH_SEP
        + timestamp.isoformat()
        + _HASH_SEP
        + sorted_items
    )
    return hashlib.sha256(preimage.encode("ascii", errors="replace")).hexdigest()


def _make_event_id(counter: int) -> str:
    """Format: "EVT-{counter:016d}". Zero-padded for lexicographic order."""
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 5 -- EventLogger
# ===========================================================================

class EventLogger:
    """
    In-memory event log with deterministic ids and per-event hashes.

    Storage
    -------
    Events are held in an instance-level deque. Each EventLogger instance is
    fully independent. With max_events set, the oldest events are evicted
    once the bound is reached; event ids keep counting, so an id is never
    reused. Without a bound no event is ever dropped.

    Failure policy
    --------------
    log_event() raises LoggingError on any invariant violation instead of
    silently discarding the event.

    Thread safety
    -------------
    None. Hosts that log from several threads serialise access themselves.
    """

    def __init__(self, max_events: Optional[int] = None) -> None:
        if max_events is not None and (
            isinstance(max_events, bool)
            or not isinstance(max_events, int)
            or max_events < 1
        ):
            raise LoggingError(
                "max_events must be a positive int or None; got: {!r}".format(max_events)
            )
        self._store: Deque[Event] = deque(maxlen=max_events)
        self._counter: int = 0
        self._max_events: Optional[int] = max_events

    # -----------------------------------------------------------------------
    # SECTION 5.1 -- log_event
    # -----------------------------------------------------------------------

    def log_event(self, event_type: str, data: Dict[str, Any], timestamp: datetime) -> str:
        """
        Record one event. Return the assigned event ID.

        Parameters
        ----------
        event_type : Non-empty category string.
        data       : Key-value payload. Float values are sanitized.
        timestamp  : Caller-supplied datetime. Must not be None.

        Returns
        -------
        str : The event ID (e.g. "EVT-0000000000000001").

        Raises
        ------
        LoggingError : If event_type is empty, data is not a dict, or
                       timestamp is missing or not a datetime.
        """
        if not event_type or not isinstance(event_type, str):
            raise LoggingError("event_type must be a non-empty string")
        if not isinstance(data, dict):
            raise LoggingError(
                "data must be a dict; got: {}".format(type(data))
            )
        if timestamp is None:
            raise LoggingError("timestamp must be caller-supplied; None is not permitted")
        if not isinstance(timestamp, datetime):
            raise LoggingError(
                "timestamp must be a datetime instance; got: {}".format(type(timestamp))
            )

        self._counter += 1
        event_id: str = _make_event_id(self._counter)
        sanitized: Dict[str, Any] = _sanitize_data(data)
        event_hash: str = _compute_hash(event_id, event_type, timestamp, sanitized)

        self._store.append(
            Event(
                id=event_id,
                type=event_type,
                timestamp=timestamp,
                data=sanitized,
                hash=event_hash,
            )
        )
        return event_id

    # -----------------------------------------------------------------------
    # SECTION 5.2 -- log_classification
    # -----------------------------------------------------------------------

    def log_classification(
        self,
        classification: Any,
        at: Any,
        delta: Any,
        timestamp: datetime,
        **context: Any,
    ) -> str:
        """
        Log a CLASSIFICATION event.

        The classification is stored by its canonical token and rank, the
        wire forms that round-trip through Triad.parse() / Triad.from_byte().
        Extra keyword arguments are added to the payload.

        Raises
        ------
        LoggingError : If classification is None or timestamp is invalid.
        """
        if classification is None:
            raise LoggingError("classification must not be None")
        data: Dict[str, Any] = {
            "classification": classification.as_str(),
            "rank": classification.rank(),
            "at": at,
            "delta": delta,
        }
        data.update(context)
        return self.log_event("CLASSIFICATION", data, timestamp)

    # -----------------------------------------------------------------------
    # SECTION 5.3 -- query_events
    # -----------------------------------------------------------------------

    def query_events(self, filter: EventFilter) -> List[Event]:
        """
        Events matching filter, in insertion order (oldest first).

        Order of application: event_type, start_time, end_time, limit.

        Raises
        ------
        LoggingError : If filter is None.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results: List[Event] = []
        for event in self._store:
            if filter.event_type is not None and event.type != filter.event_type:
                continue
            if filter.start_time is not None and event.timestamp < filter.start_time:
                continue
            if filter.end_time is not None and event.timestamp > filter.end_time:
                continue
            results.append(event)

        if filter.limit is not None:
            results = results[: filter.limit]

        return results

    # -----------------------------------------------------------------------
    # SECTION 5.4 -- get_event_stream
    # -----------------------------------------------------------------------

    def get_event_stream(self, start_time: datetime) -> Iterator[Event]:
        """
        Yield events with timestamp >= start_time, in insertion order.

        Raises
        ------
        LoggingError : If start_time is None or not a datetime instance.
        """
        if start_time is None:
            raise LoggingError("start_time must be caller-supplied; None is not permitted")
        if not isinstance(start_time, datetime):
            raise LoggingError(
                "start_time must be a datetime instance; got: {}".format(type(start_time))
            )
        for event in list(self._store):
            if event.timestamp >= start_time:
                yield event

    # -----------------------------------------------------------------------
    # SECTION 5.5 -- counters
    # -----------------------------------------------------------------------

    def event_count(self) -> int:
        """Number of events currently stored."""
        return len(self._store)

    def total_logged(self) -> int:
        """Number of events ever logged, including evicted ones."""
        return self._counter


# ===========================================================================
# SECTION 6 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by EventLogger when an invariant is violated.

    Never silently swallowed. Call sites either handle it or let it
    propagate.
    """


__all__ = ["Event", "EventFilter", "EventLogger", "LoggingError"]
