"""Timeout Budget - 엔진 실행 시간 예산

예산 구조:
- 일반 검색: 엔진별 8초 (모든 엔진이 동시에 실행되므로 전체 대기도 약 8초)
- 상태 점검(probe): 엔진별 3초
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional


DEFAULT_TIMEOUT_MS = 8000
DIAGNOSTIC_TIMEOUT_MS = 3000


@dataclass
class TimeoutBudget:
    """엔진 타임아웃 설정"""

    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    diagnostic_timeout_ms: int = DIAGNOSTIC_TIMEOUT_MS

    def __post_init__(self):
        """설정 검증"""
        if self.default_timeout_ms <= 0 or self.diagnostic_timeout_ms <= 0:
            raise ValueError("timeouts must be positive")
        if self.diagnostic_timeout_ms > self.default_timeout_ms:
            raise ValueError(
                f"diagnostic timeout ({self.diagnostic_timeout_ms}ms) exceeds "
                f"default timeout ({self.default_timeout_ms}ms)"
            )

    @classmethod
    def from_settings(cls, settings) -> "TimeoutBudget":
        return cls(
            default_timeout_ms=settings.default_timeout_ms,
            diagnostic_timeout_ms=min(settings.diagnostic_timeout_ms, settings.default_timeout_ms),
        )


class Stopwatch:
    """이벤트 루프 시계 기반 경과 시간 측정"""

    def __init__(self) -> None:
        loop = asyncio.get_running_loop()
        self._loop = loop
        self._start_time = loop.time()
        self._stopped_at: Optional[float] = None

    def stop(self) -> int:
        """측정 종료 후 경과 시간 (ms) 반환"""
        if self._stopped_at is None:
            self._stopped_at = self._loop.time()
        return self.elapsed_ms

    @property
    def elapsed_ms(self) -> int:
        """경과 시간 (ms)."""
        end = self._stopped_at if self._stopped_at is not None else self._loop.time()
        return int((end - self._start_time) * 1000)

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed_ms}ms)"
