# tests/unit/core/test_logging_layer.py
# Target: antifragile/core/logging_layer.py
# All timestamps are fixed; no clock reads.

from datetime import datetime, timedelta

import pytest

from antifragile.core.logging_layer import (
    Event,
    EventFilter,
    EventLogger,
    LoggingError,
)
from antifragile.core.triad import Triad


T0 = datetime(2026, 1, 1, 12, 0, 0)


def _ts(seconds: int) -> datetime:
    return T0 + timedelta(seconds=seconds)


class TestLogEvent:
    def test_returns_sequential_ids(self):
        logger = EventLogger()
        assert logger.log_event("A", {}, _ts(0)) == "EVT-0000000000000001"
        assert logger.log_event("A", {}, _ts(1)) == "EVT-0000000000000002"

    def test_event_fields(self):
        logger = EventLogger()
        logger.log_event("CACHE_CLEANUP", {"removed": 3}, _ts(0))
        (event,) = logger.query_events(EventFilter())
        assert isinstance(event, Event)
        assert event.type == "CACHE_CLEANUP"
        assert event.data == {"removed": 3}
        assert event.timestamp == T0
        assert len(event.hash) == 64

    def test_hash_deterministic_across_instances(self):
        a, b = EventLogger(), EventLogger()
        a.log_event("X", {"k": 1, "j": 2}, _ts(5))
        b.log_event("X", {"j": 2, "k": 1}, _ts(5))
        assert a.query_events(EventFilter())[0].hash == b.query_events(EventFilter())[0].hash

    def test_non_finite_floats_sanitized(self):
        logger = EventLogger()
        logger.log_event("X", {"a": float("nan"), "b": float("inf"), "c": 1.5}, _ts(0))
        data = logger.query_events(EventFilter())[0].data
        assert data == {"a": "NaN_DETECTED", "b": "Inf_DETECTED", "c": 1.5}

    @pytest.mark.parametrize("event_type", ["", None, 5])
    def test_bad_event_type(self, event_type):
        with pytest.raises(LoggingError):
            EventLogger().log_event(event_type, {}, T0)

    def test_data_must_be_dict(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("X", [1, 2], T0)

    def test_timestamp_required(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("X", {}, None)

    def test_timestamp_must_be_datetime(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("X", {}, "2026-01-01")


class TestLogClassification:
    def test_payload(self):
        logger = EventLogger()
        logger.log_classification(Triad.ANTIFRAGILE, 0.5, 0.1, T0, total_requests=100)
        (event,) = logger.query_events(EventFilter(event_type="CLASSIFICATION"))
        assert event.data == {
            "classification": "antifragile",
            "rank": 2,
            "at": 0.5,
            "delta": 0.1,
            "total_requests": 100,
        }

    def test_payload_round_trips(self):
        logger = EventLogger()
        logger.log_classification(Triad.FRAGILE, 1.0, 0.1, T0)
        data = logger.query_events(EventFilter())[0].data
        assert Triad.parse(data["classification"]) is Triad.FRAGILE
        assert Triad.from_byte(data["rank"]) is Triad.FRAGILE

    def test_none_classification_rejected(self):
        with pytest.raises(LoggingError):
            EventLogger().log_classification(None, 1.0, 0.1, T0)


class TestBoundedStore:
    def test_oldest_evicted(self):
        logger = EventLogger(max_events=2)
        for i in range(5):
            logger.log_event("X", {"i": i}, _ts(i))
        events = logger.query_events(EventFilter())
        assert [e.data["i"] for e in events] == [3, 4]
        assert logger.event_count() == 2
        assert logger.total_logged() == 5

    def test_ids_not_reused_after_eviction(self):
        logger = EventLogger(max_events=1)
        logger.log_event("X", {}, _ts(0))
        assert logger.log_event("X", {}, _ts(1)) == "EVT-0000000000000002"

    @pytest.mark.parametrize("bound", [0, -1, 1.5, True, "10"])
    def test_invalid_bound(self, bound):
        with pytest.raises(LoggingError):
            EventLogger(max_events=bound)

    def test_unbounded_by_default(self):
        logger = EventLogger()
        for i in range(50):
            logger.log_event("X", {}, _ts(i))
        assert logger.event_count() == 50


class TestQueryEvents:
    @pytest.fixture
    def populated(self) -> EventLogger:
        logger = EventLogger()
        logger.log_event("A", {"n": 0}, _ts(0))
        logger.log_event("B", {"n": 1}, _ts(10))
        logger.log_event("A", {"n": 2}, _ts(20))
        logger.log_event("A", {"n": 3}, _ts(30))
        return logger

    def test_by_type(self, populated):
        assert [e.data["n"] for e in populated.query_events(EventFilter(event_type="A"))] == [0, 2, 3]

    def test_time_window_inclusive(self, populated):
        events = populated.query_events(EventFilter(start_time=_ts(10), end_time=_ts(20)))
        assert [e.data["n"] for e in events] == [1, 2]

    def test_limit_applied_last(self, populated):
        events = populated.query_events(EventFilter(event_type="A", limit=2))
        assert [e.data["n"] for e in events] == [0, 2]

    def test_none_filter_rejected(self, populated):
        with pytest.raises(LoggingError):
            populated.query_events(None)


class TestEventStream:
    def test_yields_from_start_time(self):
        logger = EventLogger()
        for i in range(4):
            logger.log_event("X", {"i": i}, _ts(i * 10))
        assert [e.data["i"] for e in logger.get_event_stream(_ts(15))] == [2, 3]

    def test_start_time_validated(self):
        with pytest.raises(LoggingError):
            list(EventLogger().get_event_stream(None))
        with pytest.raises(LoggingError):
            list(EventLogger().get_event_stream(123))
