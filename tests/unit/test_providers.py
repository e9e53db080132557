"""검색엔진 어댑터 테스트

실제 HTTP 호출 없이 FakeHttpClient로 요청/응답을 검증합니다.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from unified_search.core.exceptions import (
    ParsingException,
    ProviderHTTPException,
    ProviderNotConfiguredException,
)
from unified_search.engine.aggregator import SearchAggregator
from unified_search.engine.executor import execute
from unified_search.engine.result import DateRange, EngineStatus, SearchParams
from unified_search.providers import (
    DuckDuckGoProvider,
    ExaProvider,
    JinaProvider,
    MetasoProvider,
    ProviderName,
    SearXNGProvider,
    TavilyProvider,
    build_providers,
    describe_providers,
)
from unified_search.providers.base import HttpSearchProvider
from unified_search.providers.http_client import HttpResponse

from tests.fixtures import RESULTS_PAGE


class FakeHttpClient:
    """SharedHttpClient 대역: 응답을 순서대로 반환하고 요청을 기록"""

    def __init__(self, *responses: HttpResponse):
        self.responses = list(responses)
        self.requests: list[dict] = []

    async def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)


def json_response(data, status_code: int = 200) -> HttpResponse:
    return HttpResponse(status_code=status_code, text=json.dumps(data))


@pytest.fixture
def params() -> SearchParams:
    return SearchParams(query="rust lang", max_results=5)


class TestBase:
    def test_date_range_days(self):
        assert HttpSearchProvider.date_range_days(DateRange.WEEK) == 7
        assert HttpSearchProvider.date_range_days("day") == 1
        assert HttpSearchProvider.date_range_days(DateRange.ALL) is None

    def test_published_after(self):
        now = datetime(2024, 3, 10, tzinfo=timezone.utc)
        assert HttpSearchProvider.published_after(DateRange.DAY, now) == "2024-03-09T00:00:00+00:00"
        assert HttpSearchProvider.published_after(DateRange.ALL, now) is None

    def test_as_list_ignores_malformed(self):
        assert HttpSearchProvider.as_list({"results": [{"a": 1}, "x", None]}, "results") == [{"a": 1}]
        assert HttpSearchProvider.as_list({"results": "nope"}, "results") == []
        assert HttpSearchProvider.as_list(["x"], "results") == []

    def test_base_class_is_abstract(self, test_settings):
        with pytest.raises(TypeError):
            HttpSearchProvider(test_settings, FakeHttpClient())

    def test_request_timeout_follows_settings(self, test_settings):
        provider = DuckDuckGoProvider(test_settings, FakeHttpClient())
        assert provider.request_timeout_s == 0.5


class TestDuckDuckGo:
    @pytest.mark.asyncio
    async def test_search_parses_html(self, test_settings, params):
        client = FakeHttpClient(HttpResponse(200, RESULTS_PAGE))
        provider = DuckDuckGoProvider(test_settings, client)

        results = await provider.search(params)

        assert len(results) == 3
        assert results[0].url == "https://www.rust-lang.org/"
        assert results[0].source == "DuckDuckGo"
        assert "q=rust+lang" in client.requests[0]["url"]

    @pytest.mark.asyncio
    async def test_http_error(self, test_settings, params):
        provider = DuckDuckGoProvider(test_settings, FakeHttpClient(HttpResponse(503, "")))

        with pytest.raises(ProviderHTTPException) as exc:
            await provider.search(params)
        assert exc.value.status_code == 503


class TestSearXNG:
    @pytest.mark.asyncio
    async def test_search(self, test_settings):
        client = FakeHttpClient(
            json_response(
                {
                    "results": [
                        {"title": "Rust", "url": "https://rust-lang.org", "content": "fast", "score": 2.5},
                        {"title": "Book", "url": "https://doc.rust-lang.org/book/", "publishedDate": "2024-01-01"},
                    ]
                }
            )
        )
        provider = SearXNGProvider(test_settings, client)

        results = await provider.search(
            SearchParams(query="rust", max_results=1, date_range="month", language="zh", safe_search=False)
        )

        assert [r.url for r in results] == ["https://rust-lang.org"]
        assert results[0].snippet == "fast"
        assert results[0].score == 2.5
        request = client.requests[0]
        assert request["url"] == "https://searx.test/search"
        assert request["params"]["time_range"] == "month"
        assert request["params"]["language"] == "zh"
        assert request["params"]["safesearch"] == "0"
        assert request["params"]["format"] == "json"

    @pytest.mark.asyncio
    async def test_invalid_json(self, test_settings, params):
        provider = SearXNGProvider(test_settings, FakeHttpClient(HttpResponse(200, "<html>")))

        with pytest.raises(ParsingException):
            await provider.search(params)


class TestExa:
    def test_payload_with_date_range(self, test_settings):
        provider = ExaProvider(test_settings, FakeHttpClient())

        payload = provider.build_payload(SearchParams(query="rust", max_results=7, date_range="week"))

        assert payload["query"] == "rust"
        assert payload["numResults"] == 7
        assert "startPublishedDate" in payload

    def test_payload_without_date_range(self, test_settings):
        payload = ExaProvider(test_settings, FakeHttpClient()).build_payload(SearchParams(query="rust"))
        assert "startPublishedDate" not in payload

    @pytest.mark.asyncio
    async def test_search(self, test_settings, params):
        client = FakeHttpClient(
            json_response(
                {"results": [{"title": "Rust", "url": "https://rust-lang.org", "text": "x" * 800, "score": 0.4}]}
            )
        )
        provider = ExaProvider(test_settings, client)

        results = await provider.search(params)

        assert len(results[0].snippet) == 500
        assert results[0].score == 0.4
        assert client.requests[0]["method"] == "POST"
        assert client.requests[0]["headers"]["x-api-key"] == "exa-test-key"

    @pytest.mark.asyncio
    async def test_http_error_message(self, test_settings, params):
        provider = ExaProvider(test_settings, FakeHttpClient(HttpResponse(401, "invalid api key")))

        with pytest.raises(ProviderHTTPException) as exc:
            await provider.search(params)
        assert "Exa API error: 401 - invalid api key" in str(exc.value)

    @pytest.mark.asyncio
    async def test_missing_key(self, test_settings, params):
        settings = test_settings.model_copy(update={"exa_api_key": ""})
        provider = ExaProvider(settings, FakeHttpClient())

        assert provider.is_available() is False
        with pytest.raises(ProviderNotConfiguredException) as exc:
            await provider.search(params)
        assert "EXA_API_KEY not configured" in str(exc.value)


class TestTavily:
    def test_payload(self, test_settings):
        provider = TavilyProvider(test_settings, FakeHttpClient())

        payload = provider.build_payload(SearchParams(query="rust", max_results=3, date_range="year"))

        assert payload["api_key"] == "tavily-test-key"
        assert payload["max_results"] == 3
        assert payload["days"] == 365

    @pytest.mark.asyncio
    async def test_search(self, test_settings, params):
        client = FakeHttpClient(
            json_response(
                {"results": [{"title": "Rust", "url": "https://rust-lang.org", "content": "c", "score": 0.9}]}
            )
        )

        results = await TavilyProvider(test_settings, client).search(params)

        assert results[0].snippet == "c"
        assert results[0].source == "Tavily"


class TestJina:
    @pytest.mark.asyncio
    async def test_search(self, test_settings, params):
        settings = test_settings.model_copy(update={"jina_api_key": "jina-key"})
        client = FakeHttpClient(
            json_response(
                {
                    "data": [
                        {"title": "A", "url": "https://a.com", "description": "desc"},
                        {"title": "B", "url": "https://b.com", "content": "y" * 400},
                    ]
                }
            )
        )

        results = await JinaProvider(settings, client).search(params)

        assert results[0].snippet == "desc"
        assert len(results[1].snippet) == 300
        assert client.requests[0]["url"] == "https://s.jina.ai/rust%20lang"
        assert client.requests[0]["headers"]["Authorization"] == "Bearer jina-key"


class TestMetaso:
    @pytest.mark.asyncio
    async def test_api_success(self, test_settings, params):
        settings = test_settings.model_copy(update={"metaso_api_key": "metaso-key"})
        client = FakeHttpClient(
            json_response({"results": [{"title": "秘塔", "url": "https://metaso.cn/x", "snippet": "s"}]})
        )

        results = await MetasoProvider(settings, client).search(params)

        assert results[0].title == "秘塔"
        assert len(client.requests) == 1

    @pytest.mark.asyncio
    async def test_fallback_returns_empty(self, test_settings, params):
        """API 실패 시 웹 페이지만 확인하고 결과 없음으로 처리"""
        settings = test_settings.model_copy(update={"metaso_api_key": "metaso-key"})
        client = FakeHttpClient(HttpResponse(500, ""), HttpResponse(200, "<html></html>"))

        results = await MetasoProvider(settings, client).search(params)

        assert results == []
        assert client.requests[1]["method"] == "GET"

    @pytest.mark.asyncio
    async def test_fallback_failure_raises(self, test_settings, params):
        settings = test_settings.model_copy(update={"metaso_api_key": "metaso-key"})
        client = FakeHttpClient(HttpResponse(500, ""), HttpResponse(403, ""))

        with pytest.raises(ProviderHTTPException):
            await MetasoProvider(settings, client).search(params)


class TestFactory:
    def test_build_all_available_in_fixed_order(self, test_settings):
        providers = build_providers(None, test_settings, FakeHttpClient())

        # jina/metaso 키 없음 → 제외
        assert [p.name for p in providers] == ["DuckDuckGo", "SearXNG", "Exa", "Tavily"]

    def test_requested_order_does_not_matter(self, test_settings):
        providers = build_providers(
            [ProviderName.TAVILY, ProviderName.DUCKDUCKGO], test_settings, FakeHttpClient()
        )
        assert [p.name for p in providers] == ["DuckDuckGo", "Tavily"]

    def test_requested_unavailable_is_skipped(self, test_settings):
        assert build_providers(["jina"], test_settings, FakeHttpClient()) == []

    def test_describe(self, test_settings):
        infos = {i.key: i for i in describe_providers(test_settings, FakeHttpClient())}

        assert len(infos) == 6
        assert infos[ProviderName.DUCKDUCKGO].requires_api_key is False
        assert infos[ProviderName.EXA].configured is True
        assert infos[ProviderName.JINA].configured is False


class TestThroughExecutor:
    @pytest.mark.asyncio
    async def test_string_score_from_json_is_normalized(self, test_settings, params):
        client = FakeHttpClient(
            json_response({"results": [{"title": "Rust", "url": "https://rust-lang.org", "score": "0.9"}]})
        )

        response = await execute(SearXNGProvider(test_settings, client), params, timeout_ms=500)
        result = SearchAggregator(10).aggregate("rust", [response])

        assert response.results[0].score == 0.9
        assert result.total_results == 1

    @pytest.mark.asyncio
    async def test_http_body_mentioning_timeout_is_error_status(self, test_settings, params):
        client = FakeHttpClient(HttpResponse(400, '{"detail": "timeout must be <= 30"}'))

        response = await execute(TavilyProvider(test_settings, client), params, timeout_ms=500)

        assert response.status == EngineStatus.ERROR

    @pytest.mark.asyncio
    async def test_http_error_becomes_error_status(self, test_settings, params):
        provider = TavilyProvider(test_settings, FakeHttpClient(HttpResponse(500, "oops")))

        response = await execute(provider, params, timeout_ms=500)

        assert response.status == EngineStatus.ERROR
        assert "Tavily API error: 500 - oops" in response.error
