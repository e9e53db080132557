"""Provider Protocol - Interface consumed by the executor

Executor는 이 인터페이스만 알고, 구체적인 엔진 구현은 알지 못합니다.
"""

from typing import Awaitable, Protocol, Sequence, Union

from .result import RawResult, SearchParams


class SearchProvider(Protocol):
    """검색엔진 어댑터 프로토콜

    구현 예시:
        class MyEngine(SearchProvider):
            name = "MyEngine"

            async def search(self, params: SearchParams) -> list[RawResult]:
                # HTTP 호출 후 RawResult로 매핑
                ...
    """

    name: str

    def search(
        self, params: SearchParams
    ) -> Union[Sequence[RawResult], Awaitable[Sequence[RawResult]]]:
        """검색 실행

        Args:
            params: 정규화된 검색 파라미터

        Returns:
            RawResult 목록 (동기 또는 awaitable)

        Raises:
            Exception: 어떤 예외든 Executor가 ProviderResponse.error로 흡수
        """
        ...
