"""API 스키마 패키지 - export only."""

from .search_schema import (
    EngineStatItem,
    EngineStatusItem,
    EngineStatusResponse,
    HealthResponse,
    QuickSearchRequest,
    SearchData,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
)

__all__ = [
    "SearchRequest",
    "QuickSearchRequest",
    "SearchResultItem",
    "EngineStatItem",
    "SearchData",
    "SearchResponse",
    "EngineStatusItem",
    "EngineStatusResponse",
    "HealthResponse",
]
