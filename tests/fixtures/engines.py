"""Fake 엔진 및 결과 빌더

엔진 교체 내성 테스트용. 네트워크 호출 없음.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from unified_search.engine.result import ProviderResponse, RawResult, SearchParams


@dataclass
class FakeProvider:
    """Executor/Orchestrator 테스트용 엔진

    - results: 반환할 결과
    - error: 발생시킬 예외
    - delay: 응답 전 대기 (초)
    - hang: True면 영원히 응답하지 않음
    """

    name: str
    results: list[RawResult] = field(default_factory=list)
    error: Optional[Exception] = None
    delay: float = 0.0
    hang: bool = False
    calls: list[SearchParams] = field(default_factory=list)

    async def search(self, params: SearchParams) -> list[RawResult]:
        self.calls.append(params)
        if self.hang:
            await asyncio.Event().wait()
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.results)


class SyncRaisingProvider:
    """search() 호출 즉시(코루틴 생성 전) 예외를 던지는 엔진"""

    name = "SyncRaiser"

    def search(self, params: SearchParams):
        raise RuntimeError("network unreachable")


class SyncProvider:
    """동기 함수로 결과를 반환하는 엔진"""

    name = "SyncEngine"

    def __init__(self, results: list[RawResult]):
        self.results = results

    def search(self, params: SearchParams) -> list[RawResult]:
        return self.results


class StubbornProvider:
    """취소 요청을 받아도 바로 멈추지 않는 엔진"""

    name = "Stubborn"

    def __init__(self, linger: float = 0.3):
        self.linger = linger
        self.stopped = asyncio.Event()

    async def search(self, params: SearchParams) -> list[RawResult]:
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            await asyncio.sleep(self.linger)
            self.stopped.set()
            raise
        return []


def raw(
    url: str,
    title: str = "",
    snippet: str = "",
    source: str = "",
    published_date: Optional[str] = None,
    score: Optional[float] = None,
) -> RawResult:
    return RawResult(
        title=title or url,
        url=url,
        snippet=snippet,
        source=source,
        published_date=published_date,
        score=score,
    )


def ok_response(engine: str, results: list[RawResult], latency_ms: int = 10) -> ProviderResponse:
    """Executor를 거친 것과 같은 성공 응답 (source = 엔진 이름)"""
    attributed = [
        RawResult(
            title=r.title,
            url=r.url,
            snippet=r.snippet,
            source=engine,
            published_date=r.published_date,
            score=r.score,
        )
        for r in results
    ]
    return ProviderResponse.success(engine, attributed, latency_ms)


def distinct_results(prefix: str, count: int, title: str = "rust") -> list[RawResult]:
    """서로 다른 URL의 결과 count개"""
    return [
        raw(f"https://{prefix}.example.com/page/{i}", title=f"{title} {prefix} {i}")
        for i in range(count)
    ]
