"""라우트 공통 의존성 (테스트에서 dependency_overrides로 교체)"""

from typing import Callable, Iterable, Optional

from fastapi import Depends

from unified_search.core.config import Settings, settings
from unified_search.engine.budget import TimeoutBudget
from unified_search.engine.provider import SearchProvider
from unified_search.providers import (
    DuckDuckGoProvider,
    ProviderName,
    SharedHttpClient,
    build_providers,
    get_shared_http_client,
)


ProviderFactory = Callable[[Optional[Iterable[ProviderName]]], list[SearchProvider]]


def get_settings() -> Settings:
    return settings


def get_http_client() -> SharedHttpClient:
    return get_shared_http_client()


def get_timeout_budget(app_settings: Settings = Depends(get_settings)) -> TimeoutBudget:
    return TimeoutBudget.from_settings(app_settings)


def get_provider_factory(
    app_settings: Settings = Depends(get_settings),
    client: SharedHttpClient = Depends(get_http_client),
) -> ProviderFactory:
    """요청된 엔진 이름 → 사용 가능한 엔진 인스턴스 목록"""

    def factory(requested: Optional[Iterable[ProviderName]]) -> list[SearchProvider]:
        return list(build_providers(requested, app_settings, client))

    return factory


def get_quick_provider(
    app_settings: Settings = Depends(get_settings),
    client: SharedHttpClient = Depends(get_http_client),
) -> SearchProvider:
    return DuckDuckGoProvider(app_settings, client)
