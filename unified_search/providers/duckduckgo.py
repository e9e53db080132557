"""DuckDuckGo 검색엔진 (HTML 버전, API 키 불필요)"""

from __future__ import annotations

from urllib.parse import urlencode

from unified_search.core.exceptions import ProviderHTTPException
from unified_search.engine.result import RawResult, SearchParams

from .base import HttpSearchProvider
from .duckduckgo_parsing import parse_results


DUCKDUCKGO_HTML_URL = "https://html.duckduckgo.com/html/"


class DuckDuckGoProvider(HttpSearchProvider):
    name = "DuckDuckGo"

    async def search(self, params: SearchParams) -> list[RawResult]:
        url = f"{DUCKDUCKGO_HTML_URL}?{urlencode({'q': params.query})}"
        response = await self.get_text(
            url,
            headers={
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
            },
        )
        if not response.ok:
            raise ProviderHTTPException(self.name, response.status_code)

        return [
            RawResult(title=link.title, url=link.url, snippet=link.snippet, source=self.name)
            for link in parse_results(response.text, params.max_results)
        ]
