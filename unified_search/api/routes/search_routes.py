"""Search Routes (Engine Layer)

HTTP Layer가 Engine Layer로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
"""

import asyncio

from fastapi import APIRouter, Depends

from unified_search.core.config import Settings
from unified_search.core.exceptions import ValidationException
from unified_search.core.logging import logger, sanitize_for_log
from unified_search.engine import (
    AggregatedResult,
    EngineStatus,
    SearchAggregator,
    SearchOrchestrator,
    SearchParams,
    SearchProvider,
    TimeoutBudget,
    execute,
)
from unified_search.schemas.search_schema import (
    QuickSearchRequest,
    SearchData,
    SearchRequest,
    SearchResponse,
)
from unified_search.utils.formatting import render

from .dependencies import (
    ProviderFactory,
    get_provider_factory,
    get_quick_provider,
    get_settings,
    get_timeout_budget,
)

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def unified_search(
    request: SearchRequest,
    provider_factory: ProviderFactory = Depends(get_provider_factory),
    budget: TimeoutBudget = Depends(get_timeout_budget),
    app_settings: Settings = Depends(get_settings),
):
    """통합 검색 API

    Flow:
        1. 요청 검증 및 SearchParams 생성
        2. 요청된 엔진 중 사용 가능한 엔진 선택
        3. Engine에 위임 (동시 실행 → 집계)
        4. 결과를 HTTP Response로 변환
    """
    try:
        params = SearchParams(
            query=request.query,
            max_results=request.max_results or app_settings.max_results,
            date_range=request.date_range,
            language=request.language,
            safe_search=request.safe_search,
        )
    except ValidationException as e:
        logger.warning(f"[API] Input validation failed: {e}")
        return _error_response(f"입력 검증 실패: {e.message}", e.error_code)

    providers = provider_factory(request.engines)
    if not providers:
        logger.warning(f"[API] No provider available: requested={request.engines}")
        return _error_response(
            "사용 가능한 검색엔진이 없습니다. API 키 설정을 확인하세요.", "NO_PROVIDER"
        )

    logger.info(
        f"[API] Search request: query='{sanitize_for_log(params.query, 50)}', "
        f"engines={len(providers)}, max_results={params.max_results}"
    )

    orchestrator = SearchOrchestrator(providers, budget)
    try:
        aggregated = await asyncio.wait_for(
            orchestrator.search(params),
            timeout=app_settings.api_search_timeout_s,
        )
    except asyncio.TimeoutError:
        logger.error(f"[API] Timeout: query='{sanitize_for_log(params.query, 50)}'")
        return _error_response("검색 시간이 초과되었습니다. 잠시 후 다시 시도해주세요.", "TIMEOUT")
    except Exception as e:
        logger.error(f"[API] Search failed: {type(e).__name__}", exc_info=True)
        return _error_response(f"검색 중 오류가 발생했습니다: {str(e)}", "INTERNAL_ERROR")

    return _success_response(aggregated, request.output_format)


@router.post("/search/quick", response_model=SearchResponse)
async def quick_search(
    request: QuickSearchRequest,
    provider: SearchProvider = Depends(get_quick_provider),
    budget: TimeoutBudget = Depends(get_timeout_budget),
):
    """빠른 검색 API - DuckDuckGo만 사용 (API 키 불필요)"""
    params = SearchParams(query=request.query, max_results=request.max_results)
    response = await execute(provider, params, budget.default_timeout_ms)

    if response.error:
        error_code = "TIMEOUT" if response.status == EngineStatus.TIMEOUT else "PROVIDER_ERROR"
        return _error_response(f"검색 실패: {response.error}", error_code)

    aggregated = SearchAggregator(request.max_results).aggregate(params.query, [response])
    return _success_response(aggregated, "text")


def _success_response(aggregated: AggregatedResult, output_format: str) -> SearchResponse:
    if aggregated.all_failed:
        message = "모든 검색엔진 호출에 실패했습니다."
    elif aggregated.total_results == 0:
        message = "검색 결과가 없습니다."
    else:
        message = f"{aggregated.total_results}건의 결과를 찾았습니다."

    return SearchResponse(
        status="success",
        data=SearchData.from_aggregated(aggregated),
        rendered=render(aggregated, output_format) if output_format != "json" else None,
        message=message,
        error_code=None,
    )


def _error_response(message: str, error_code: str) -> SearchResponse:
    return SearchResponse(status="error", data=None, message=message, error_code=error_code)
