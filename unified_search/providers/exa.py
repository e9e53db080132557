"""Exa AI 검색엔진"""

from __future__ import annotations

from typing import Any, Dict

from unified_search.engine.result import RawResult, SearchParams
from unified_search.utils.text_utils import truncate

from .base import HttpSearchProvider


EXA_SEARCH_URL = "https://api.exa.ai/search"
EXA_TEXT_MAX_CHARACTERS = 500


class ExaProvider(HttpSearchProvider):
    name = "Exa"
    api_key_setting = "EXA_API_KEY"

    def build_payload(self, params: SearchParams) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "query": params.query,
            "numResults": params.max_results,
            "type": "auto",
            "contents": {"text": {"maxCharacters": EXA_TEXT_MAX_CHARACTERS}},
        }
        start = self.published_after(params.date_range)
        if start:
            payload["startPublishedDate"] = start
        return payload

    async def search(self, params: SearchParams) -> list[RawResult]:
        api_key = self.require_api_key()
        data = await self.post_json(
            EXA_SEARCH_URL,
            self.build_payload(params),
            headers={"x-api-key": api_key, "Content-Type": "application/json"},
        )

        return [
            RawResult(
                title=item.get("title") or "",
                url=item.get("url") or "",
                snippet=truncate(item.get("text") or item.get("summary") or "", EXA_TEXT_MAX_CHARACTERS),
                source=self.name,
                published_date=item.get("publishedDate"),
                score=item.get("score"),
            )
            for item in self.as_list(data, "results")
        ]
