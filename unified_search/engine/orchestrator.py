"""Search Orchestrator - Main Engine Entry Point

Coordinates one search request:
1. Per-provider parameter split
2. Concurrent executor fan-out (timeout bounded)
3. Aggregation (dedup, scoring, ranking, truncation)
"""

from __future__ import annotations

import asyncio
import math
from typing import Optional, Sequence

from unified_search.core.logging import logger, sanitize_for_log

from .aggregator import SearchAggregator
from .budget import TimeoutBudget
from .executor import execute
from .provider import SearchProvider
from .result import MAX_RESULTS_LIMIT, AggregatedResult, ProviderResponse, SearchParams


# 중복 제거로 줄어드는 만큼 엔진별로 여유분을 더 요청
PER_PROVIDER_HEADROOM = 5


class SearchOrchestrator:
    """검색 오케스트레이터

    요청 단위로 생성하며 불변 설정(엔진 목록, 타임아웃)만 가집니다.

    Usage:
        orchestrator = SearchOrchestrator(providers, TimeoutBudget())
        result = await orchestrator.search(SearchParams(query="rust", max_results=10))
    """

    def __init__(
        self,
        providers: Sequence[SearchProvider],
        budget: Optional[TimeoutBudget] = None,
    ):
        """
        Args:
            providers: 호출 순서대로의 엔진 목록 (이 순서가 병합 우선순위)
            budget: 타임아웃 설정 (기본값: 엔진별 8초)
        """
        self.providers = tuple(providers)
        self.budget = budget or TimeoutBudget()

    def per_provider_max_results(self, max_results: int) -> int:
        """엔진별 요청 결과 수"""
        if not self.providers:
            return max_results
        share = math.ceil(max_results / len(self.providers)) + PER_PROVIDER_HEADROOM
        return min(share, MAX_RESULTS_LIMIT)

    async def search(self, params: SearchParams) -> AggregatedResult:
        """통합 검색 실행

        Args:
            params: 요청 파라미터 (max_results는 최종 반환 개수)

        Returns:
            AggregatedResult: 일부/전체 엔진이 실패해도 정상 반환
        """
        logger.info(
            f"Search started: query='{sanitize_for_log(params.query, 50)}', "
            f"engines={[getattr(p, 'name', '?') for p in self.providers]}"
        )

        provider_params = params.with_max_results(self.per_provider_max_results(params.max_results))
        responses = await self._fan_out(provider_params, self.budget.default_timeout_ms)

        aggregated = SearchAggregator(params.max_results).aggregate(params.query, responses)

        failed = [e.name for e in aggregated.engines if e.error]
        if aggregated.all_failed:
            logger.warning(f"All engines failed: {failed}")
        elif failed:
            logger.info(f"Search completed with partial failure: failed={failed}")
        logger.info(f"Search completed: returned={aggregated.total_results}")
        return aggregated

    async def probe(self, params: SearchParams) -> list[ProviderResponse]:
        """상태 점검용 실행 (짧은 타임아웃, 집계 없음)"""
        return await self._fan_out(params, self.budget.diagnostic_timeout_ms)

    async def _fan_out(self, params: SearchParams, timeout_ms: int) -> list[ProviderResponse]:
        # gather는 완료 순서와 무관하게 입력 순서대로 결과를 돌려줌
        return list(
            await asyncio.gather(
                *(execute(provider, params, timeout_ms) for provider in self.providers)
            )
        )
