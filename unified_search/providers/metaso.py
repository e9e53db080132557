"""Metaso (秘塔) 검색엔진"""

from __future__ import annotations

from urllib.parse import urlencode

from unified_search.core.exceptions import ProviderHTTPException
from unified_search.core.logging import logger
from unified_search.engine.result import RawResult, SearchParams

from .base import HttpSearchProvider


METASO_API_URL = "https://metaso.cn/api/search"
METASO_WEB_URL = "https://metaso.cn/search"


class MetasoProvider(HttpSearchProvider):
    name = "Metaso"
    api_key_setting = "METASO_API_KEY"

    async def search(self, params: SearchParams) -> list[RawResult]:
        api_key = self.require_api_key()
        response = await self.client.request(
            "POST",
            METASO_API_URL,
            provider=self.name,
            timeout_s=self.request_timeout_s,
            headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
            json={"query": params.query, "limit": params.max_results, "mode": "concise"},
        )
        if not response.ok:
            logger.info(f"[Metaso] API returned {response.status_code}, trying web fallback")
            return await self.fallback_search(params)

        data = self._parse_json(response)
        return [
            RawResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("snippet") or "",
                source=self.name,
                published_date=item.get("date"),
            )
            for item in self.as_list(data, "results")
        ]

    async def fallback_search(self, params: SearchParams) -> list[RawResult]:
        """웹 페이지 가용성만 확인

        웹 결과 페이지는 클라이언트 렌더링이라 HTML에서 결과를 추출할 수 없어
        "결과 없음"으로 처리합니다. 웹도 실패하면 실패로 보고합니다.
        """
        response = await self.get_text(
            f"{METASO_WEB_URL}?{urlencode({'q': params.query})}",
            headers={"Accept": "text/html,application/xhtml+xml"},
        )
        if not response.ok:
            raise ProviderHTTPException(self.name, response.status_code)
        return []
