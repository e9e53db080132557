"""집계 결과 렌더링 (text / json / markdown)"""

from __future__ import annotations

import json

from unified_search.engine.result import AggregatedResult, EngineStatus


RULE = "=" * 60
THIN_RULE = "-" * 60
OUTPUT_FORMATS = ("text", "json", "markdown")


def format_results(response: AggregatedResult) -> str:
    """사람이 읽는 텍스트 형식"""
    lines: list[str] = [
        RULE,
        f"🔍 검색어: {response.query}",
        f"📊 결과 {response.total_results}건 | 처리 시각: {response.processed_at}",
        RULE,
        "",
        "📡 검색엔진 상태:",
        THIN_RULE,
    ]

    for engine in response.engines:
        mark = "✅" if engine.status == EngineStatus.SUCCESS else "❌"
        line = f"  {mark} {engine.name:<12} | {engine.latency_ms}ms | {engine.count}건"
        if engine.error:
            line += f" | {engine.error}"
        lines.append(line)

    lines.extend(["", RULE, "📋 검색 결과:", RULE])

    if not response.results:
        lines.append("")
        lines.append("  결과가 없습니다.")

    for index, result in enumerate(response.results, start=1):
        lines.append("")
        lines.append(f"【{index}】{result.title}")
        lines.append(f"  🔗 {result.url}")
        lines.append(f"  📝 {result.snippet or '요약 없음'}")
        if result.is_multi_source:
            lines.append(f"  🤝 {result.source}")
        lines.append(THIN_RULE)

    return "\n".join(lines)


def format_results_json(response: AggregatedResult) -> str:
    return json.dumps(response.to_dict(), ensure_ascii=False, indent=2)


def format_results_markdown(response: AggregatedResult) -> str:
    parts = [
        f"# 🔍 검색 결과: {response.query}\n",
        f"> 총 {response.total_results}건\n",
        "## 📋 결과 목록\n",
    ]
    for index, result in enumerate(response.results, start=1):
        parts.append(f"### {index}. {result.title}")
        parts.append(f"- 🔗 [바로가기]({result.url})")
        parts.append(f"- 📝 {result.snippet}\n")
    return "\n".join(parts)


def render(response: AggregatedResult, output_format: str = "text") -> str:
    """출력 형식별 렌더링 (알 수 없는 형식은 text)"""
    if output_format == "json":
        return format_results_json(response)
    if output_format == "markdown":
        return format_results_markdown(response)
    return format_results(response)
