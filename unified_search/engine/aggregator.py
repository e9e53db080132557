"""Search Aggregator - 중복 제거 + 관련도 정렬

엔진별 ProviderResponse 목록을 하나의 AggregatedResult로 합칩니다.
I/O가 없는 순수 변환이며 예외를 던지지 않습니다.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from unified_search.core.logging import logger
from unified_search.utils.text_utils import tokenize, unique_tokens
from unified_search.utils.url_utils import normalize_url_key

from .result import (
    AggregatedResult,
    CanonicalResult,
    EngineStats,
    ProviderResponse,
    RawResult,
)


# 관련도 가중치
TITLE_TOKEN_WEIGHT = 10
SNIPPET_TOKEN_WEIGHT = 3
TITLE_PHRASE_BONUS = 20
MULTI_SOURCE_BONUS = 15
NATIVE_SCORE_WEIGHT = 5
PUBLISHED_DATE_BONUS = 3
LONG_SNIPPET_BONUS = 5
LONG_SNIPPET_LENGTH = 100


class SearchAggregator:
    """검색 결과 집계기

    Usage:
        aggregator = SearchAggregator(max_results=10)
        result = aggregator.aggregate("rust", responses)
    """

    def __init__(self, max_results: int = 20):
        """
        Args:
            max_results: 반환할 최대 결과 수 (양의 정수)
        """
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results <= 0:
            raise ValueError(f"max_results must be a positive integer: {max_results!r}")
        self.max_results = max_results

    def aggregate(self, query: str, responses: Iterable[ProviderResponse]) -> AggregatedResult:
        """집계 실행

        1. 결과 수집 + 엔진별 통계
        2. URL 기준 중복 제거/병합
        3. 관련도 점수 계산
        4. 안정 정렬 후 상위 N개

        Args:
            query: 검색어
            responses: 엔진 호출 순서대로의 응답 목록

        Returns:
            AggregatedResult: 결과가 없어도 항상 유효한 객체
        """
        responses = list(responses)
        engines = [EngineStats.from_response(r) for r in responses]

        collected: list[RawResult] = []
        for response in responses:
            collected.extend(response.results)

        unique = self.deduplicate(collected)
        for result in unique:
            result.relevance_score = self.score(result, query)

        # sorted()는 안정 정렬이므로 동점이면 병합 순서 유지
        ranked = sorted(unique, key=lambda r: r.relevance_score, reverse=True)
        top = ranked[: self.max_results]

        logger.debug(
            f"[Aggregator] query='{query[:50]}', engines={len(engines)}, "
            f"collected={len(collected)}, unique={len(unique)}, returned={len(top)}"
        )

        return AggregatedResult(
            query=query,
            total_results=len(top),
            engines=engines,
            results=top,
            processed_at=datetime.now(timezone.utc).isoformat(),
        )

    def deduplicate(self, results: Iterable[RawResult]) -> list[CanonicalResult]:
        """정규화 URL 기준 중복 제거 (처음 본 순서 유지)"""
        seen: dict[str, CanonicalResult] = {}
        for raw in results:
            key = normalize_url_key(raw.url)
            existing = seen.get(key)
            if existing is None:
                seen[key] = CanonicalResult.from_raw(raw)
            else:
                self.merge(existing, raw)
        return list(seen.values())

    @staticmethod
    def merge(existing: CanonicalResult, incoming: RawResult) -> CanonicalResult:
        """중복 결과 병합 (existing을 갱신)

        - title/snippet: 더 긴 쪽 (같으면 기존 유지)
        - url: 처음 본 값 유지
        - sources: 새 엔진이면 추가
        - published_date: 처음 본 비어있지 않은 값
        - score: 엔진 점수 중 최댓값
        """
        if len(incoming.title) > len(existing.title):
            existing.title = incoming.title
        if len(incoming.snippet) > len(existing.snippet):
            existing.snippet = incoming.snippet
        if incoming.source and incoming.source not in existing.sources:
            existing.sources.append(incoming.source)
        if not existing.published_date and incoming.published_date:
            existing.published_date = incoming.published_date
        existing.score = _max_score(existing.score, incoming.score)
        return existing

    @staticmethod
    def score(result: CanonicalResult, query: str) -> float:
        """가산식 관련도 점수"""
        query_terms = unique_tokens(query)
        title_terms = set(tokenize(result.title))
        snippet_terms = set(tokenize(result.snippet))

        score = 0.0
        for term in query_terms:
            if term in title_terms:
                score += TITLE_TOKEN_WEIGHT
            if term in snippet_terms:
                score += SNIPPET_TOKEN_WEIGHT

        if query.lower() in result.title.lower():
            score += TITLE_PHRASE_BONUS

        if len(result.sources) > 1:
            score += MULTI_SOURCE_BONUS * (len(result.sources) - 1)

        if result.score:
            score += result.score * NATIVE_SCORE_WEIGHT

        if result.published_date:
            score += PUBLISHED_DATE_BONUS

        if len(result.snippet) > LONG_SNIPPET_LENGTH:
            score += LONG_SNIPPET_BONUS

        return score


def _max_score(a: Optional[float], b: Optional[float]) -> Optional[float]:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)
