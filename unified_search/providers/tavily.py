"""Tavily 검색엔진"""

from __future__ import annotations

from typing import Any, Dict

from unified_search.engine.result import RawResult, SearchParams

from .base import HttpSearchProvider


TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class TavilyProvider(HttpSearchProvider):
    name = "Tavily"
    api_key_setting = "TAVILY_API_KEY"

    def build_payload(self, params: SearchParams) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "api_key": self.api_key,
            "query": params.query,
            "max_results": params.max_results,
            "include_answer": False,
            "include_raw_content": False,
            "search_depth": "basic",
        }
        days = self.date_range_days(params.date_range)
        if days:
            payload["days"] = days
        return payload

    async def search(self, params: SearchParams) -> list[RawResult]:
        self.require_api_key()
        data = await self.post_json(TAVILY_SEARCH_URL, self.build_payload(params))

        return [
            RawResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=item.get("content") or "",
                source=self.name,
                published_date=item.get("published_date"),
                score=item.get("score"),
            )
            for item in self.as_list(data, "results")
        ]
