"""Pydantic 스키마 정의 (Security & Validation Enhanced)"""
from typing import Literal, Optional, List
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from unified_search.engine.result import AggregatedResult, CanonicalResult, DateRange, EngineStats
from unified_search.providers.factory import ProviderName


OutputFormat = Literal["text", "json", "markdown"]


class SearchRequest(BaseModel):
    """통합 검색 요청"""
    query: str = Field(..., min_length=1, max_length=500, description="검색어")
    max_results: Optional[int] = Field(None, ge=1, le=50, description="최대 결과 수 (1~50, 미지정 시 서버 기본값)")
    date_range: DateRange = Field(DateRange.ALL, description="최신성 필터")
    engines: Optional[List[ProviderName]] = Field(None, max_length=10, description="사용할 엔진 (기본: 전체)")
    language: str = Field("zh", max_length=16, description="검색 언어 (zh, en 등)")
    safe_search: bool = Field(True, description="세이프서치 여부")
    output_format: OutputFormat = Field("text", description="rendered 필드 형식")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """검색어 검증: 공백/제어문자 제한"""
        if not v or not v.strip():
            raise ValueError("검색어는 공백만으로 구성될 수 없습니다")
        if "\0" in v:
            raise ValueError("검색어에 허용되지 않는 문자가 포함되어 있습니다")
        return v.strip()


class QuickSearchRequest(BaseModel):
    """빠른 검색 요청 (DuckDuckGo 전용)"""
    query: str = Field(..., min_length=1, max_length=500, description="검색어")
    max_results: int = Field(10, ge=1, le=20, description="최대 결과 수 (1~20)")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("검색어는 공백만으로 구성될 수 없습니다")
        return v.strip()


class SearchResultItem(BaseModel):
    """검색 결과 1건"""
    title: str
    url: str
    snippet: str = ""
    source: str = Field(..., description="엔진 이름 (여러 엔진이면 A+B)")
    published_date: str | None = None
    relevance_score: float = Field(..., description="이번 집계 안에서만 비교 가능한 점수")

    @classmethod
    def from_canonical(cls, result: CanonicalResult) -> "SearchResultItem":
        return cls(**result.to_dict())


class EngineStatItem(BaseModel):
    """엔진별 실행 통계"""
    name: str
    status: Literal["success", "error", "timeout"]
    latency_ms: int = Field(..., ge=0)
    count: int = Field(..., ge=0)
    error: str | None = None

    @classmethod
    def from_stats(cls, stats: EngineStats) -> "EngineStatItem":
        return cls(
            name=stats.name,
            status=stats.status.value,
            latency_ms=stats.latency_ms,
            count=stats.count,
            error=stats.error,
        )


class SearchData(BaseModel):
    """집계 결과"""
    query: str
    total_results: int = Field(..., ge=0, description="반환된 결과 수")
    engines: list[EngineStatItem]
    results: list[SearchResultItem]
    processed_at: str

    @classmethod
    def from_aggregated(cls, aggregated: AggregatedResult) -> "SearchData":
        return cls(
            query=aggregated.query,
            total_results=aggregated.total_results,
            engines=[EngineStatItem.from_stats(e) for e in aggregated.engines],
            results=[SearchResultItem.from_canonical(r) for r in aggregated.results],
            processed_at=aggregated.processed_at,
        )


class SearchResponse(BaseModel):
    """검색 응답"""
    status: str = Field(..., description="success or error")
    data: Optional[SearchData] = Field(None, description="집계 결과")
    rendered: str | None = Field(None, description="text/markdown 형식 렌더링 결과")
    message: str = Field(..., description="응답 메시지")
    error_code: str | None = Field(None, description="에러 코드 (error 시)")


class EngineStatusItem(BaseModel):
    """엔진 설정/점검 상태"""
    key: str
    name: str
    requires_api_key: bool
    configured: bool
    probe_status: Literal["success", "error", "timeout"] | None = None
    probe_latency_ms: int | None = None
    probe_error: str | None = None


class EngineStatusResponse(BaseModel):
    """엔진 상태 응답"""
    available: int
    total: int
    engines: list[EngineStatusItem]


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    service: str
    version: str
    timestamp: datetime
