"""Jina AI 검색엔진 (s.jina.ai)"""

from __future__ import annotations

from urllib.parse import quote

from unified_search.engine.result import RawResult, SearchParams
from unified_search.utils.text_utils import truncate

from .base import HttpSearchProvider


JINA_SEARCH_URL = "https://s.jina.ai/"
JINA_CONTENT_SNIPPET_LENGTH = 300


class JinaProvider(HttpSearchProvider):
    name = "Jina"
    api_key_setting = "JINA_API_KEY"

    async def search(self, params: SearchParams) -> list[RawResult]:
        api_key = self.require_api_key()
        data = await self.get_json(
            f"{JINA_SEARCH_URL}{quote(params.query, safe='')}",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
                "X-Retain-Images": "none",
            },
        )

        return [
            RawResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("description")
                or truncate(item.get("content") or "", JINA_CONTENT_SNIPPET_LENGTH),
                source=self.name,
                published_date=item.get("publishedTime"),
            )
            for item in self.as_list(data, "data")[: params.max_results]
        ]
