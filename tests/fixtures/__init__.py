"""테스트 자산 레이어

규칙:
- 네트워크 의존 없음
- 엔진 Fake와 HTML 자산만 보관
"""

from .duckduckgo_html import EMPTY_PAGE, FALLBACK_PAGE, RESULTS_PAGE
from .engines import (
    FakeProvider,
    StubbornProvider,
    SyncProvider,
    SyncRaisingProvider,
    distinct_results,
    ok_response,
    raw,
)

__all__ = [
    "RESULTS_PAGE",
    "FALLBACK_PAGE",
    "EMPTY_PAGE",
    "FakeProvider",
    "StubbornProvider",
    "SyncProvider",
    "SyncRaisingProvider",
    "distinct_results",
    "ok_response",
    "raw",
]
