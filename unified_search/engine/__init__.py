"""Engine Layer - Result Aggregation Core

This module provides the core engine layer of the search service:
- execute: Timeout-bounded, never-raising provider invocation
- SearchAggregator: Dedup, relevance scoring, ranking, truncation
- SearchOrchestrator: Concurrent fan-out + aggregation for one request
- TimeoutBudget / Stopwatch: Timeout settings and latency measurement
- Result types: SearchParams, RawResult, ProviderResponse, AggregatedResult
"""

from .aggregator import SearchAggregator
from .budget import Stopwatch, TimeoutBudget
from .executor import execute
from .orchestrator import SearchOrchestrator
from .provider import SearchProvider
from .result import (
    AggregatedResult,
    CanonicalResult,
    DateRange,
    EngineStats,
    EngineStatus,
    ProviderResponse,
    RawResult,
    SearchParams,
)

__all__ = [
    "execute",
    "SearchAggregator",
    "SearchOrchestrator",
    "SearchProvider",
    "TimeoutBudget",
    "Stopwatch",
    # Result types
    "SearchParams",
    "DateRange",
    "RawResult",
    "ProviderResponse",
    "EngineStatus",
    "EngineStats",
    "CanonicalResult",
    "AggregatedResult",
]
