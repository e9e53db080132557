"""SearXNG 검색엔진 (자체 호스팅 인스턴스, API 키 불필요)"""

from __future__ import annotations

from unified_search.engine.result import DateRange, RawResult, SearchParams

from .base import HttpSearchProvider


class SearXNGProvider(HttpSearchProvider):
    name = "SearXNG"

    async def search(self, params: SearchParams) -> list[RawResult]:
        query = {
            "q": params.query,
            "format": "json",
            "pageno": "1",
            "language": params.language or "en",
            "safesearch": "1" if params.safe_search else "0",
        }
        if params.date_range != DateRange.ALL:
            query["time_range"] = params.date_range.value

        data = await self.get_json(
            f"{self.settings.searxng_url}/search",
            params=query,
            headers={"Accept": "application/json"},
        )

        return [
            RawResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("content") or "",
                source=self.name,
                published_date=item.get("publishedDate"),
                score=item.get("score"),
            )
            for item in self.as_list(data, "results")[: params.max_results]
        ]
