"""Search Result - Standardized Result Format

Provides the per-request data model shared by executors, the aggregator
and the transport layer.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional

from unified_search.core.exceptions import InvalidQueryException, ValidationException


MAX_QUERY_LENGTH = 500
MAX_RESULTS_LIMIT = 50


class DateRange(str, Enum):
    """최신성 필터"""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class EngineStatus(str, Enum):
    """엔진별 실행 상태

    집계 결과의 engines 통계에 사용됩니다.
    """

    SUCCESS = "success"
    ERROR = "error"
    TIMEOUT = "timeout"

    @classmethod
    def from_outcome(cls, error: Optional[str], timed_out: bool = False) -> "EngineStatus":
        """실행 결과로부터 상태 판정

        에러 문자열에는 엔진 응답 본문이 섞일 수 있으므로 문구가 아니라
        실패 종류(timed_out)로 timeout을 구분합니다.

        - 에러 없음 → success
        - 타임아웃으로 실패 → timeout
        - 그 외 → error
        """
        if not error:
            return cls.SUCCESS
        if timed_out:
            return cls.TIMEOUT
        return cls.ERROR


@dataclass(frozen=True)
class SearchParams:
    """정규화된 검색 파라미터 (요청 단위 불변)

    Attributes:
        query: 검색어 (공백 제거 후 1~500자)
        max_results: 최대 결과 수 (1~50)
        date_range: 최신성 필터
        language: 언어 태그 (예: "zh", "en")
        safe_search: 세이프서치 여부
    """

    query: str
    max_results: int = 10
    date_range: DateRange = DateRange.ALL
    language: Optional[str] = None
    safe_search: bool = True

    def __post_init__(self):
        """파라미터 검증"""
        if not isinstance(self.query, str) or not self.query.strip():
            raise InvalidQueryException("query must not be empty")
        if len(self.query) > MAX_QUERY_LENGTH:
            raise InvalidQueryException(f"query longer than {MAX_QUERY_LENGTH} characters")
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise ValidationException("max_results", f"must be an integer (value: {self.max_results!r})")
        if not 1 <= self.max_results <= MAX_RESULTS_LIMIT:
            raise ValidationException(
                "max_results", f"must be between 1 and {MAX_RESULTS_LIMIT} (value: {self.max_results})"
            )
        # "week" 같은 문자열도 허용
        object.__setattr__(self, "date_range", DateRange(self.date_range))

    def with_max_results(self, max_results: int) -> "SearchParams":
        """max_results만 바꾼 사본 반환"""
        return replace(self, max_results=max_results)


@dataclass
class RawResult:
    """엔진 하나가 반환한 후보 결과

    Attributes:
        title: 제목
        url: 엔진이 준 절대 URL
        snippet: 요약 (빈 문자열 가능)
        source: 엔진 이름 (Executor가 덮어씀)
        published_date: 게시일 (자유 형식 문자열)
        score: 엔진 고유 관련도 점수 (엔진 간 비교 불가)
    """

    title: str
    url: str
    snippet: str = ""
    source: str = ""
    published_date: Optional[str] = None
    score: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawResult":
        """딕셔너리에서 RawResult 생성

        Args:
            data: title/url 필수. publishedDate(camelCase)도 허용

        Returns:
            RawResult 인스턴스

        Raises:
            KeyError: title 또는 url이 없는 경우
        """
        return cls(
            title=_as_text(data["title"]),
            url=_as_text(data["url"]),
            snippet=_as_text(data.get("snippet")),
            source=_as_text(data.get("source")),
            published_date=_as_text(data.get("published_date") or data.get("publishedDate")) or None,
            score=_as_score(data.get("score")),
        )

    def attributed(self, source: str) -> "RawResult":
        """source를 바꾸고 필드 타입을 정리한 사본

        엔진 JSON 값이 그대로 들어온 경우(숫자 제목, 문자열 점수 등)도
        집계 단계에서 문자열/실수로 다룰 수 있게 맞춥니다.
        """
        return RawResult(
            title=_as_text(self.title),
            url=_as_text(self.url),
            snippet=_as_text(self.snippet),
            source=source,
            published_date=_as_text(self.published_date) or None,
            score=_as_score(self.score),
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_score(value: Any) -> Optional[float]:
    # 변환할 수 없는 점수는 "점수 없음"으로 취급
    if value is None or isinstance(value, bool):
        return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    return score if math.isfinite(score) else None


@dataclass
class ProviderResponse:
    """엔진 하나의 실행 결과

    실패(error 존재) 시 results는 항상 비어 있습니다.
    error 없이 results가 비어 있으면 "결과 없음" 성공입니다.
    timed_out은 실패 원인이 타임아웃인 경우에만 True입니다.
    """

    engine: str
    results: list[RawResult] = field(default_factory=list)
    latency_ms: int = 0
    error: Optional[str] = None
    timed_out: bool = False

    @property
    def is_success(self) -> bool:
        return not self.error

    @property
    def status(self) -> EngineStatus:
        return EngineStatus.from_outcome(self.error, self.timed_out)

    @classmethod
    def success(cls, engine: str, results: list[RawResult], latency_ms: int) -> "ProviderResponse":
        return cls(engine=engine, results=results, latency_ms=latency_ms)

    @classmethod
    def failure(
        cls, engine: str, error: str, latency_ms: int, timed_out: bool = False
    ) -> "ProviderResponse":
        return cls(
            engine=engine,
            results=[],
            latency_ms=latency_ms,
            error=error or "Unknown error",
            timed_out=timed_out,
        )

    @classmethod
    def timeout(cls, engine: str, timeout_ms: int, latency_ms: int) -> "ProviderResponse":
        """타임아웃 결과 생성

        Args:
            engine: 엔진 이름
            timeout_ms: 설정된 타임아웃 (밀리초)
            latency_ms: 실제 경과 시간 (밀리초)
        """
        return cls(
            engine=engine,
            results=[],
            latency_ms=latency_ms,
            error=f"Timeout after {timeout_ms}ms",
            timed_out=True,
        )


@dataclass
class EngineStats:
    """집계 결과에 포함되는 엔진별 통계"""

    name: str
    status: EngineStatus
    latency_ms: int
    count: int
    error: Optional[str] = None

    @classmethod
    def from_response(cls, response: ProviderResponse) -> "EngineStats":
        return cls(
            name=response.engine,
            status=response.status,
            latency_ms=response.latency_ms,
            count=len(response.results),
            error=response.error,
        )


@dataclass
class CanonicalResult:
    """중복 제거/병합 후 결과

    Attributes:
        sources: 이 결과를 반환한 엔진 이름 (중복 없음, 처음 본 순서)
        relevance_score: 한 번의 집계 안에서만 의미 있는 관련도 점수
    """

    title: str
    url: str
    snippet: str = ""
    sources: list[str] = field(default_factory=list)
    published_date: Optional[str] = None
    score: Optional[float] = None
    relevance_score: float = 0.0

    @property
    def source(self) -> str:
        """여러 엔진이 확인한 결과는 "A+B" 형태"""
        return "+".join(self.sources)

    @property
    def is_multi_source(self) -> bool:
        return len(self.sources) > 1

    @classmethod
    def from_raw(cls, raw: RawResult) -> "CanonicalResult":
        return cls(
            title=raw.title,
            url=raw.url,
            snippet=raw.snippet,
            sources=[raw.source] if raw.source else [],
            published_date=raw.published_date,
            score=raw.score,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "source": self.source,
            "published_date": self.published_date,
            "relevance_score": self.relevance_score,
        }


@dataclass
class AggregatedResult:
    """집계 결과 표준 포맷

    Attributes:
        query: 검색어
        total_results: 반환된(잘린 후) 결과 수
        engines: 호출된 모든 엔진의 통계
        results: 관련도 순으로 정렬된 결과
        processed_at: 생성 시각 (ISO-8601, UTC)
    """

    query: str
    total_results: int
    engines: list[EngineStats]
    results: list[CanonicalResult]
    processed_at: str

    @property
    def all_failed(self) -> bool:
        return bool(self.engines) and all(e.status != EngineStatus.SUCCESS for e in self.engines)

    def to_dict(self) -> dict[str, Any]:
        engines = []
        for stat in self.engines:
            item = asdict(stat)
            item["status"] = stat.status.value
            engines.append(item)
        return {
            "query": self.query,
            "total_results": self.total_results,
            "engines": engines,
            "results": [r.to_dict() for r in self.results],
            "processed_at": self.processed_at,
        }
