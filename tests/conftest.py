"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 엔진 주입
- 전역 상태 초기화

금지:
- 실제 검색엔진 호출 (HTTP)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from unified_search.core.config import Settings  # noqa: E402
from unified_search.engine.result import SearchParams  # noqa: E402
from tests.fixtures import FakeProvider, distinct_results  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def search_params() -> SearchParams:
    return SearchParams(query="rust", max_results=10)


@pytest.fixture
def test_settings() -> Settings:
    """.env와 무관한 고정 설정 (키는 명시적으로 지정)"""
    return Settings(
        _env_file=None,
        exa_api_key="exa-test-key",
        tavily_api_key="tavily-test-key",
        jina_api_key="",
        metaso_api_key="",
        searxng_url="https://searx.test",
        default_timeout_ms=500,
        diagnostic_timeout_ms=200,
    )


@pytest.fixture
def three_providers() -> list[FakeProvider]:
    """각 5건씩 서로 다른 URL을 반환하는 엔진 3개"""
    return [
        FakeProvider(name="A", results=distinct_results("a", 5)),
        FakeProvider(name="B", results=distinct_results("b", 5)),
        FakeProvider(name="C", results=distinct_results("c", 5)),
    ]
