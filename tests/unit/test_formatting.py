"""출력 렌더링 테스트."""

from __future__ import annotations

import json

import pytest

from unified_search.engine.result import AggregatedResult, CanonicalResult, EngineStats, EngineStatus
from unified_search.utils.formatting import (
    format_results,
    format_results_json,
    format_results_markdown,
    render,
)


@pytest.fixture
def aggregated() -> AggregatedResult:
    return AggregatedResult(
        query="rust",
        total_results=2,
        engines=[
            EngineStats("Exa", EngineStatus.SUCCESS, 320, 2),
            EngineStats("Jina", EngineStatus.TIMEOUT, 8000, 0, "Timeout after 8000ms"),
        ],
        results=[
            CanonicalResult(
                title="Rust Lang",
                url="https://rust-lang.org/",
                snippet="A language empowering everyone",
                sources=["Exa", "Tavily"],
                relevance_score=45.0,
            ),
            CanonicalResult(title="Book", url="https://doc.rust-lang.org/book/", sources=["Exa"]),
        ],
        processed_at="2024-01-01T00:00:00+00:00",
    )


def test_text_format(aggregated):
    text = format_results(aggregated)

    assert "🔍 검색어: rust" in text
    assert "✅ Exa" in text
    assert "❌ Jina" in text
    assert "Timeout after 8000ms" in text
    assert "【1】Rust Lang" in text
    assert "🤝 Exa+Tavily" in text
    assert "요약 없음" in text


def test_text_format_empty():
    empty = AggregatedResult("rust", 0, [], [], "2024-01-01T00:00:00+00:00")
    assert "결과가 없습니다." in format_results(empty)


def test_json_format(aggregated):
    data = json.loads(format_results_json(aggregated))

    assert data["query"] == "rust"
    assert data["engines"][1]["status"] == "timeout"
    assert data["results"][0]["source"] == "Exa+Tavily"


def test_markdown_format(aggregated):
    markdown = format_results_markdown(aggregated)

    assert markdown.startswith("# 🔍 검색 결과: rust")
    assert "### 1. Rust Lang" in markdown
    assert "[바로가기](https://rust-lang.org/)" in markdown


def test_render_dispatch(aggregated):
    assert render(aggregated, "json") == format_results_json(aggregated)
    assert render(aggregated, "markdown") == format_results_markdown(aggregated)
    assert render(aggregated, "unknown") == format_results(aggregated)
