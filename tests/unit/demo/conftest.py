import pytest

from antifragile.demo.cache import AdaptiveCache
from antifragile.demo.metrics import ServiceMetrics


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> AdaptiveCache:
    """Small cache on the fake clock: TTL 10 s, capacity 3."""
    return AdaptiveCache(ttl_seconds=10.0, max_capacity=3, clock=clock)


@pytest.fixture
def metrics(clock) -> ServiceMetrics:
    return ServiceMetrics(clock=clock)
