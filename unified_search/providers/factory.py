"""Provider Factory - 요청 단위 엔진 인스턴스 생성

전역 레지스트리 없이 요청마다 새 인스턴스를 만듭니다.
엔진 순서는 고정이며, 이 순서가 곧 병합 우선순위입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from unified_search.core.config import Settings
from unified_search.core.logging import logger

from .base import HttpSearchProvider
from .duckduckgo import DuckDuckGoProvider
from .exa import ExaProvider
from .http_client import SharedHttpClient
from .jina import JinaProvider
from .metaso import MetasoProvider
from .searxng import SearXNGProvider
from .tavily import TavilyProvider


class ProviderName(str, Enum):
    """지원 엔진 목록"""

    DUCKDUCKGO = "duckduckgo"
    SEARXNG = "searxng"
    EXA = "exa"
    TAVILY = "tavily"
    METASO = "metaso"
    JINA = "jina"


PROVIDER_CLASSES: dict[ProviderName, type[HttpSearchProvider]] = {
    ProviderName.DUCKDUCKGO: DuckDuckGoProvider,
    ProviderName.SEARXNG: SearXNGProvider,
    ProviderName.EXA: ExaProvider,
    ProviderName.TAVILY: TavilyProvider,
    ProviderName.METASO: MetasoProvider,
    ProviderName.JINA: JinaProvider,
}


@dataclass
class ProviderInfo:
    """엔진 설정 상태"""

    key: ProviderName
    name: str
    requires_api_key: bool
    configured: bool


def build_provider(
    key: ProviderName, settings: Settings, client: SharedHttpClient
) -> HttpSearchProvider:
    return PROVIDER_CLASSES[ProviderName(key)](settings, client)


def build_providers(
    requested: Optional[Iterable[ProviderName]],
    settings: Settings,
    client: SharedHttpClient,
) -> list[HttpSearchProvider]:
    """요청된 엔진 중 사용 가능한 것만 생성

    Args:
        requested: 사용할 엔진 목록 (None/빈 목록이면 전체)
        settings: 애플리케이션 설정
        client: 공유 HTTP 클라이언트

    Returns:
        고정 순서(ProviderName 정의 순)의 엔진 목록
    """
    wanted = {ProviderName(r) for r in requested} if requested else set(ProviderName)

    providers: list[HttpSearchProvider] = []
    for key in ProviderName:
        if key not in wanted:
            continue
        provider = build_provider(key, settings, client)
        if not provider.is_available():
            logger.debug(f"[Providers] {provider.name} skipped: {provider.api_key_setting} not configured")
            continue
        providers.append(provider)
    return providers


def describe_providers(settings: Settings, client: SharedHttpClient) -> list[ProviderInfo]:
    """모든 엔진의 설정 상태"""
    infos = []
    for key in ProviderName:
        provider = build_provider(key, settings, client)
        infos.append(
            ProviderInfo(
                key=key,
                name=provider.name,
                requires_api_key=provider.requires_api_key,
                configured=provider.is_available(),
            )
        )
    return infos
