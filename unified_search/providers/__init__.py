"""Search provider adapters (HTTP API + HTML).

공개 API는 이 파일에서만 export합니다.
"""

from .base import HttpSearchProvider
from .duckduckgo import DuckDuckGoProvider
from .exa import ExaProvider
from .factory import ProviderInfo, ProviderName, build_provider, build_providers, describe_providers
from .http_client import SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .jina import JinaProvider
from .metaso import MetasoProvider
from .searxng import SearXNGProvider
from .tavily import TavilyProvider

__all__ = [
    "HttpSearchProvider",
    "DuckDuckGoProvider",
    "SearXNGProvider",
    "ExaProvider",
    "TavilyProvider",
    "MetasoProvider",
    "JinaProvider",
    "ProviderName",
    "ProviderInfo",
    "build_provider",
    "build_providers",
    "describe_providers",
    "SharedHttpClient",
    "get_shared_http_client",
    "shutdown_shared_http_client",
]
