# antifragile/demo/service.py
# Adaptive pricing API: a service that classifies itself.
#
# Uncached prices cost a simulated computation delay; cached prices are
# free. As load rises, popular queries repeat, the hit rate climbs and the
# mean response time drops, so effective capacity grows faster than load.
# /antifragile/* reports that behaviour through ServiceSnapshot.
#
# ROUTES:
#   GET  /health               "OK"
#   POST /price                price a product configuration
#   GET  /antifragile/status   current classification, metrics, analysis
#   GET  /antifragile/curve    payoff curve over the load grid
#   GET  /antifragile/history  periodic classifications, oldest first
#   GET  /cache/stats          cache entries and hit counters
#   GET  /events               logged events (rejections, classifications,
#                              cache cleanups), oldest first
#
# /price limits (HTTP 400, logged as REQUEST_REJECTED):
#   quantity in 1..MAX_QUANTITY, len(product_id) <= MAX_PRODUCT_ID_LENGTH,
#   len(options) <= MAX_OPTIONS. Unknown body fields fail schema
#   validation (HTTP 422).
#
# Handlers are plain functions; FastAPI runs them in its thread pool, so
# the simulated delay blocks a worker thread and not the event loop.
#
# Standard import pattern:
#   from antifragile.demo.service import create_app

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, List, Optional

from fastapi import FastAPI, HTTPException, Query

from antifragile.core.triad import Triad
from antifragile.demo.cache import AdaptiveCache
from antifragile.demo.metrics import ServiceMetrics, ServiceSnapshot, normalized_load
from antifragile.demo.pricing import (
    PriceQuery,
    calculate_price,
    computation_delay_seconds,
)
from antifragile.demo.schemas import (
    AntifragileStatusResponse,
    CacheStatsResponse,
    ConvexityAnalysis,
    CurrentMetrics,
    CurvePoint,
    CurveResponse,
    EventResponse,
    EventsResponse,
    HistoryEntryResponse,
    PriceRequest,
    PriceResponse,
)
from antifragile.utils.constants import (
    CACHE_CLEANUP_INTERVAL_SECONDS,
    CURRENCY,
    CURVE_DEFAULT_POINTS,
    DEFAULT_TOLERANCE,
    EVENT_LOG_MAX_EVENTS,
    EVENTS_DEFAULT_LIMIT,
    LOAD_DELTA,
    MAX_OPTIONS,
    MAX_PRODUCT_ID_LENGTH,
    MAX_QUANTITY,
)


# The service payoff exponent never drops below EXPONENT_BASE > 1, so only
# ANTIFRAGILE is reachable here. The other entries keep the maps total.
_CURVE_SHAPE = {
    Triad.FRAGILE:     "concave",
    Triad.ROBUST:      "linear",
    Triad.ANTIFRAGILE: "convex",
}

_EXPLANATION = {
    Triad.FRAGILE:     "Cache is cold. System degrades under load.",
    Triad.ROBUST:      "Cache is warming. System scales proportionally.",
    Triad.ANTIFRAGILE: "Cache is hot. System benefits from stress.",
}


def validate_price_request(request: PriceRequest) -> Optional[str]:
    """Reason the request is out of bounds, or None when acceptable."""
    if request.quantity < 1 or request.quantity > MAX_QUANTITY:
        return "quantity must be between 1 and {}".format(MAX_QUANTITY)
    if len(request.product_id) > MAX_PRODUCT_ID_LENGTH:
        return "product_id longer than {} characters".format(MAX_PRODUCT_ID_LENGTH)
    if len(request.options) > MAX_OPTIONS:
        return "more than {} options".format(MAX_OPTIONS)
    return None


def create_app(
    simulate_latency: bool = True,
    cache: Optional[AdaptiveCache] = None,
    metrics: Optional[ServiceMetrics] = None,
    cleanup_interval_seconds: float = CACHE_CLEANUP_INTERVAL_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> FastAPI:
    """
    Build the pricing app.

    Parameters
    ----------
    simulate_latency         : Sleep computation_delay_seconds() on cache misses.
    cache, metrics           : Injected collaborators; fresh ones when omitted.
    cleanup_interval_seconds : Period of the background cache cleanup.
    sleep                    : Delay function used for simulated latency.
    """
    cache = cache if cache is not None else AdaptiveCache()
    metrics = metrics if metrics is not None else ServiceMetrics()

    async def _cleanup_loop() -> None:
        while True:
            await asyncio.sleep(cleanup_interval_seconds)
            removed = cache.cleanup()
            metrics.record_cleanup(removed, len(cache))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = asyncio.create_task(_cleanup_loop())
        try:
            yield
        finally:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

    app = FastAPI(title="Adaptive Pricing API", version="0.1.0", lifespan=lifespan)
    app.state.cache = cache
    app.state.metrics = metrics

    @app.get("/health")
    def health_check() -> str:
        return "OK"

    @app.post("/price", response_model=PriceResponse)
    def price(body: PriceRequest) -> PriceResponse:
        reason = validate_price_request(body)
        if reason is not None:
            metrics.record_rejection(
                reason,
                product_id=body.product_id[:MAX_PRODUCT_ID_LENGTH],
                quantity=body.quantity,
                option_count=len(body.options),
            )
            raise HTTPException(status_code=400, detail=reason)

        start = time.perf_counter()
        query = PriceQuery(
            product_id=body.product_id,
            quantity=body.quantity,
            options=tuple(body.options),
        ).normalized()

        result = cache.get(query)
        cache_hit = result is not None
        if cache_hit:
            metrics.record_cache_hit()
        else:
            metrics.record_cache_miss()
            if simulate_latency:
                sleep(computation_delay_seconds(query))
            result = calculate_price(query)
            cache.insert(query, result)

        elapsed = time.perf_counter() - start
        metrics.record_request(elapsed)

        return PriceResponse(
            price=result.total_price,
            currency=CURRENCY,
            cache_hit=cache_hit,
            computation_time_ms=elapsed * 1000.0,
        )

    @app.get("/antifragile/status", response_model=AntifragileStatusResponse)
    def antifragile_status() -> AntifragileStatusResponse:
        stats = metrics.get_stats()
        snapshot = ServiceSnapshot.from_stats(stats)
        at = normalized_load(stats.requests_per_second)
        classification = snapshot.classify(at, LOAD_DELTA)
        with_tolerance = snapshot.classify_with_tolerance(at, LOAD_DELTA, DEFAULT_TOLERANCE)

        return AntifragileStatusResponse(
            classification=classification.as_str(),
            rank=classification.rank(),
            description=classification.description,
            metrics=CurrentMetrics(
                total_requests=stats.total_requests,
                cache_hit_rate=stats.cache_hit_rate,
                avg_response_time_ms=stats.avg_response_time_ms,
                requests_per_second=stats.requests_per_second,
            ),
            analysis=ConvexityAnalysis(
                exponent=snapshot.exponent(),
                curve_shape=_CURVE_SHAPE[classification],
                explanation=_EXPLANATION[classification],
                at=at,
                delta=LOAD_DELTA,
                tolerance_classification=with_tolerance.as_str(),
            ),
        )

    @app.get("/antifragile/curve", response_model=CurveResponse)
    def antifragile_curve() -> CurveResponse:
        stats = metrics.get_stats()
        snapshot = ServiceSnapshot.from_stats(stats)
        classification = snapshot.current_classification(stats.requests_per_second)
        return CurveResponse(
            exponent=snapshot.exponent(),
            curve_shape="{} ({})".format(
                _CURVE_SHAPE[classification], classification.as_str()
            ),
            points=[
                CurvePoint(load=load, payoff=payoff)
                for load, payoff in snapshot.curve_data(CURVE_DEFAULT_POINTS)
            ],
        )

    @app.get("/antifragile/history", response_model=List[HistoryEntryResponse])
    def antifragile_history() -> List[HistoryEntryResponse]:
        return [
            HistoryEntryResponse(
                timestamp=entry.timestamp.isoformat(),
                total_requests=entry.total_requests,
                cache_hit_rate=entry.cache_hit_rate,
                avg_response_time_ms=entry.avg_response_time_ms,
                classification=entry.classification.as_str(),
            )
            for entry in metrics.get_history()
        ]

    @app.get("/cache/stats", response_model=CacheStatsResponse)
    def cache_stats() -> CacheStatsResponse:
        cache_state = cache.stats()
        stats = metrics.get_stats()
        return CacheStatsResponse(
            entries=cache_state.entries,
            hits=stats.cache_hits,
            misses=stats.cache_misses,
            hit_rate=stats.cache_hit_rate,
        )

    @app.get("/events", response_model=EventsResponse)
    def events(
        event_type: Optional[str] = None,
        since: Optional[datetime] = None,
        limit: int = Query(EVENTS_DEFAULT_LIMIT, ge=1, le=EVENT_LOG_MAX_EVENTS),
    ) -> EventsResponse:
        stored, total_logged = metrics.events(event_type=event_type, since=since, limit=limit)
        return EventsResponse(
            total_logged=total_logged,
            events=[
                EventResponse(
                    id=event.id,
                    type=event.type,
                    timestamp=event.timestamp.isoformat(),
                    data=event.data,
                    hash=event.hash,
                )
                for event in stored
            ],
        )

    return app


__all__ = ["create_app", "validate_price_request"]
