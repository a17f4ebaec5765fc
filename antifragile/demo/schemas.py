"""
Request and response schemas for the adaptive pricing service.
--------------------------------------------------------------
Pydantic v2 models. PriceRequest rejects unknown fields (HTTP 422);
range limits on its values are enforced by the handler (HTTP 400).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str
    quantity: int
    options: List[str] = Field(default_factory=list)


class PriceResponse(BaseModel):
    price: float
    currency: str
    cache_hit: bool
    computation_time_ms: float


class CurrentMetrics(BaseModel):
    total_requests: int
    cache_hit_rate: float
    avg_response_time_ms: float
    requests_per_second: float


class ConvexityAnalysis(BaseModel):
    exponent: float
    curve_shape: str
    explanation: str
    at: float
    delta: float
    tolerance_classification: Optional[str] = None


class AntifragileStatusResponse(BaseModel):
    classification: str
    rank: int = Field(..., ge=0, le=2)
    description: str
    metrics: CurrentMetrics
    analysis: ConvexityAnalysis


class CurvePoint(BaseModel):
    load: float
    payoff: float


class CurveResponse(BaseModel):
    exponent: float
    curve_shape: str
    points: List[CurvePoint]


class HistoryEntryResponse(BaseModel):
    timestamp: str
    total_requests: int
    cache_hit_rate: float
    avg_response_time_ms: float
    classification: str


class CacheStatsResponse(BaseModel):
    entries: int
    hits: int
    misses: int
    hit_rate: float


class EventResponse(BaseModel):
    id: str
    type: str
    timestamp: str
    data: Dict[str, Any]
    hash: str


class EventsResponse(BaseModel):
    total_logged: int
    events: List[EventResponse]
