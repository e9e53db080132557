"""DuckDuckGo HTML - 결과 페이지 파싱 유틸.

이 모듈은 네트워크(fetch)와 분리된 순수 파싱 로직을 담습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from selectolax.parser import HTMLParser

from unified_search.utils.text_utils import clean_html_text
from unified_search.utils.url_utils import is_absolute_http_url, normalize_href, unwrap_redirect_url


@dataclass
class ParsedLink:
    title: str
    url: str
    snippet: str = ""


def parse_results(html: str, max_results: int = 10) -> List[ParsedLink]:
    """결과 페이지에서 제목/URL/요약 추출

    1차: a.result__a (제목 링크) + .result__snippet (요약)을 순서대로 매칭
    2차: 1차가 비면 class에 "result"가 들어간 http(s) 링크 전체

    Args:
        html: html.duckduckgo.com 응답 본문
        max_results: 최대 개수

    Returns:
        파싱 결과 목록 (제목/URL 없는 항목 제외)
    """
    if not html or max_results <= 0:
        return []

    tree = HTMLParser(html)
    results = _parse_result_blocks(tree, max_results)
    if results:
        return results
    return _parse_fallback_links(tree, max_results)


def _parse_result_blocks(tree: HTMLParser, max_results: int) -> List[ParsedLink]:
    anchors = tree.css("a.result__a")
    snippets = [clean_html_text(node.text(separator=" ")) for node in tree.css(".result__snippet")]

    results: List[ParsedLink] = []
    for index, anchor in enumerate(anchors):
        if len(results) >= max_results:
            break
        href = anchor.attributes.get("href") or ""
        url = unwrap_redirect_url(normalize_href(href))
        title = clean_html_text(anchor.text(separator=" "))
        if not url or not title:
            continue
        snippet = snippets[index] if index < len(snippets) else ""
        results.append(ParsedLink(title=title, url=url, snippet=snippet))
    return results


def _parse_fallback_links(tree: HTMLParser, max_results: int) -> List[ParsedLink]:
    results: List[ParsedLink] = []
    for anchor in tree.css("a[href]"):
        if len(results) >= max_results:
            break
        classes = anchor.attributes.get("class") or ""
        if "result" not in classes:
            continue
        url = unwrap_redirect_url(anchor.attributes.get("href") or "")
        title = clean_html_text(anchor.text(separator=" "))
        if not is_absolute_http_url(url) or not title:
            continue
        results.append(ParsedLink(title=title, url=url))
    return results
