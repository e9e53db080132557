"""검색엔진 상태 엔드포인트"""
from fastapi import APIRouter, Depends

from unified_search.core.config import Settings
from unified_search.core.logging import logger
from unified_search.engine import SearchOrchestrator, SearchParams, TimeoutBudget
from unified_search.providers import SharedHttpClient, describe_providers
from unified_search.schemas.search_schema import EngineStatusItem, EngineStatusResponse

from .dependencies import (
    ProviderFactory,
    get_http_client,
    get_provider_factory,
    get_settings,
    get_timeout_budget,
)

router = APIRouter(prefix="/api/v1", tags=["engines"])

PROBE_QUERY = "test"


@router.get("/engines/status", response_model=EngineStatusResponse)
async def engines_status(
    probe: bool = False,
    app_settings: Settings = Depends(get_settings),
    client: SharedHttpClient = Depends(get_http_client),
    provider_factory: ProviderFactory = Depends(get_provider_factory),
    budget: TimeoutBudget = Depends(get_timeout_budget),
):
    """
    검색엔진 설정 상태

    - probe=false: API 키 설정 여부만 확인
    - probe=true: 사용 가능한 엔진에 짧은 타임아웃으로 실제 검색을 1회 실행
    """
    items = [
        EngineStatusItem(
            key=info.key.value,
            name=info.name,
            requires_api_key=info.requires_api_key,
            configured=info.configured,
        )
        for info in describe_providers(app_settings, client)
    ]

    if probe:
        providers = provider_factory(None)
        responses = await SearchOrchestrator(providers, budget).probe(
            SearchParams(query=PROBE_QUERY, max_results=1)
        )
        by_name = {r.engine: r for r in responses}
        for item in items:
            response = by_name.get(item.name)
            if response is None:
                continue
            item.probe_status = response.status.value
            item.probe_latency_ms = response.latency_ms
            item.probe_error = response.error
        logger.info(f"[API] Engine probe: {[(r.engine, r.status.value) for r in responses]}")

    available = sum(1 for item in items if item.configured)
    return EngineStatusResponse(available=available, total=len(items), engines=items)
