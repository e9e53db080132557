"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
- 검색 결과/쿼리는 보관하지 않습니다 (커넥션 풀만 공유).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Dict

from curl_cffi.requests import AsyncSession

from unified_search.core.config import settings
from unified_search.core.exceptions import ProviderNetworkException, ProviderTimeoutException
from unified_search.core.logging import logger


@dataclass
class HttpResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=settings.http_impersonate,
                headers=self.default_headers(),
                allow_redirects=True,
                max_clients=settings.http_max_clients,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": settings.http_user_agent,
            "Accept-Language": "en-US,en;q=0.5",
        }

    async def request(
        self,
        method: str,
        url: str,
        *,
        provider: str,
        timeout_s: float,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> HttpResponse:
        """HTTP 요청 1회

        Raises:
            ProviderTimeoutException: 요청 타임아웃
            ProviderNetworkException: 연결 실패 등 전송 계층 오류
        """
        sess = await self._ensure_session()
        try:
            resp = await sess.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=timeout_s,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] {method} failed: {provider}: {type(e).__name__}")
            if "timed out" in str(e).lower() or "timeout" in type(e).__name__.lower():
                raise ProviderTimeoutException(provider, int(timeout_s * 1000)) from e
            raise ProviderNetworkException(provider, f"{type(e).__name__}: {e}") from e

        status = getattr(resp, "status_code", 0) or 0
        text = getattr(resp, "text", "") or ""
        return HttpResponse(status_code=status, text=text)

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.warning(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {e}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
