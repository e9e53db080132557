"""Provider Base - HTTP 기반 검색엔진 어댑터 공통 기능

각 어댑터는 search(params)만 구현하고, 요청/응답 검증은 여기서 처리합니다.
"""

from __future__ import annotations

import json
from abc import abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from unified_search.core.config import Settings
from unified_search.core.exceptions import (
    ParsingException,
    ProviderHTTPException,
    ProviderNotConfiguredException,
)
from unified_search.engine.provider import SearchProvider
from unified_search.engine.result import DateRange, RawResult, SearchParams

from .http_client import HttpResponse, SharedHttpClient


_DATE_RANGE_DAYS = {
    DateRange.DAY: 1,
    DateRange.WEEK: 7,
    DateRange.MONTH: 30,
    DateRange.YEAR: 365,
}


class HttpSearchProvider(SearchProvider):
    """HTTP 검색엔진 어댑터 기본 클래스

    Attributes:
        name: 표시용 엔진 이름 (결과 source에 기록)
        api_key_setting: 필요한 환경 변수 이름 (키 불필요 엔진은 None)
    """

    name: str = ""
    api_key_setting: Optional[str] = None

    def __init__(self, settings: Settings, client: SharedHttpClient):
        self.settings = settings
        self.client = client
        self.api_key = ""
        if self.api_key_setting:
            self.api_key = getattr(settings, self.api_key_setting.lower(), "") or ""

    @property
    def requires_api_key(self) -> bool:
        return self.api_key_setting is not None

    def is_available(self) -> bool:
        """키가 필요한 엔진은 키가 설정된 경우에만 사용 가능"""
        return not self.requires_api_key or bool(self.api_key)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ProviderNotConfiguredException(self.name, self.api_key_setting or "API key")
        return self.api_key

    @abstractmethod
    async def search(self, params: SearchParams) -> list[RawResult]:
        """엔진별 검색 구현 (HTTP 호출 후 RawResult로 매핑)"""

    @property
    def request_timeout_s(self) -> float:
        # Executor 타임아웃보다 오래 매달리지 않도록 동일 예산 사용
        return self.settings.default_timeout_ms / 1000

    async def get_text(self, url: str, **kwargs: Any) -> HttpResponse:
        return await self.client.request(
            "GET", url, provider=self.name, timeout_s=self.request_timeout_s, **kwargs
        )

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        response = await self.get_text(url, **kwargs)
        return self._parse_json(self._check_status(response))

    async def post_json(self, url: str, payload: Dict[str, Any], **kwargs: Any) -> Any:
        response = await self.client.request(
            "POST", url, provider=self.name, timeout_s=self.request_timeout_s, json=payload, **kwargs
        )
        return self._parse_json(self._check_status(response))

    def _check_status(self, response: HttpResponse) -> HttpResponse:
        if not response.ok:
            raise ProviderHTTPException(self.name, response.status_code, response.text)
        return response

    def _parse_json(self, response: HttpResponse) -> Any:
        try:
            return json.loads(response.text)
        except ValueError as e:
            raise ParsingException(self.name, f"invalid JSON ({e})") from e

    @staticmethod
    def date_range_days(date_range: DateRange) -> Optional[int]:
        """최신성 필터를 일 수로 변환 (all → None)"""
        return _DATE_RANGE_DAYS.get(DateRange(date_range))

    @classmethod
    def published_after(cls, date_range: DateRange, now: Optional[datetime] = None) -> Optional[str]:
        """최신성 필터의 시작 시각 (ISO-8601)"""
        days = cls.date_range_days(date_range)
        if not days:
            return None
        now = now or datetime.now(timezone.utc)
        return (now - timedelta(days=days)).isoformat()

    @staticmethod
    def as_list(data: Any, key: str) -> list[Dict[str, Any]]:
        """응답 JSON에서 결과 배열 추출 (없거나 형식이 다르면 빈 목록)"""
        if not isinstance(data, dict):
            return []
        items = data.get(key)
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, available={self.is_available()})"
