"""Engine Executor - 타임아웃/예외/지연시간을 표준화하는 실행 래퍼

어떤 엔진 어댑터든 ProviderResponse 하나로 변환합니다.
이 모듈의 execute()는 호출자 자신이 취소된 경우를 제외하고 절대 예외를 던지지 않습니다.

타임아웃 시 엔진 작업은 cancel()만 요청하고 기다리지 않습니다.
취소 훅이 없는 전송 계층이면 작업이 백그라운드에서 끝까지 실행될 수 있으며,
그 결과는 버려집니다. 누수 범위는 해당 요청의 수명으로 한정됩니다.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Iterable, Mapping

from unified_search.core.exceptions import ProviderTimeoutException
from unified_search.core.logging import logger, sanitize_for_log

from .budget import DEFAULT_TIMEOUT_MS, Stopwatch
from .provider import SearchProvider
from .result import ProviderResponse, RawResult, SearchParams


async def execute(
    provider: SearchProvider,
    params: SearchParams,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> ProviderResponse:
    """엔진 1회 실행 (재시도 없음)

    Args:
        provider: name/search(params)를 가진 엔진 어댑터
        params: 검색 파라미터
        timeout_ms: 타임아웃 (밀리초)

    Returns:
        ProviderResponse: 성공/실패/타임아웃 모두 이 형태로 반환
    """
    name = provider_name(provider)
    stopwatch = Stopwatch()
    logger.debug(f"[Executor] {name} started: timeout={timeout_ms}ms")

    task = asyncio.ensure_future(_invoke(provider, params))
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except asyncio.CancelledError:
        task.cancel()
        task.add_done_callback(_discard_late_outcome)
        raise

    if not done:
        latency_ms = stopwatch.stop()
        task.cancel()
        task.add_done_callback(_discard_late_outcome)
        logger.warning(f"[Executor] {name} timeout: {timeout_ms}ms exceeded")
        return ProviderResponse.timeout(name, timeout_ms, latency_ms)

    latency_ms = stopwatch.stop()

    if task.cancelled():
        logger.warning(f"[Executor] {name} cancelled itself after {latency_ms}ms")
        return ProviderResponse.failure(name, "Search cancelled", latency_ms)

    error = task.exception()
    if error is not None:
        message = describe_error(error)
        logger.warning(
            f"[Executor] {name} failed: {type(error).__name__}: {sanitize_for_log(message, 200)}"
        )
        return ProviderResponse.failure(name, message, latency_ms, timed_out=is_timeout_error(error))

    try:
        results = [_attribute(item, name) for item in task.result()]
    except Exception as e:
        logger.warning(f"[Executor] {name} returned malformed results: {type(e).__name__}: {e}")
        return ProviderResponse.failure(name, f"Malformed results: {describe_error(e)}", latency_ms)

    logger.info(f"[Executor] {name} success: count={len(results)}, latency={latency_ms}ms")
    return ProviderResponse.success(name, results, latency_ms)


def provider_name(provider: Any) -> str:
    """엔진 이름 (name 속성 없으면 클래스명)"""
    name = getattr(provider, "name", None)
    return str(name) if name else type(provider).__name__


def describe_error(error: BaseException) -> str:
    """예외 메시지 추출 (비어 있으면 일반 문구)"""
    return str(error) or type(error).__name__ or "Unknown error"


def is_timeout_error(error: BaseException) -> bool:
    """엔진 내부 타임아웃(HTTP 요청 타임아웃 등) 여부"""
    return isinstance(error, (ProviderTimeoutException, TimeoutError))


async def _invoke(provider: SearchProvider, params: SearchParams) -> Iterable[Any]:
    result = provider.search(params)
    if inspect.isawaitable(result):
        result = await result
    if result is None:
        return []
    return list(result)


def _attribute(item: Any, name: str) -> RawResult:
    # 어댑터가 넣은 source 값과 무관하게 엔진 이름으로 통일, 필드 타입도 정리
    if isinstance(item, RawResult):
        return item.attributed(name)
    if isinstance(item, Mapping):
        return RawResult.from_dict(item).attributed(name)
    raise TypeError(f"unsupported result type: {type(item).__name__}")


def _discard_late_outcome(task: asyncio.Future) -> None:
    # 버려진 작업의 늦은 예외가 "never retrieved" 경고로 남지 않도록 소비
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"[Executor] late failure discarded: {type(error).__name__}")
