"""텍스트 유틸리티 - 관련도 점수용 토큰화 및 HTML 텍스트 정리"""

from __future__ import annotations

import html
import re


# ASCII 단어 문자, 공백, CJK 통합 한자 이외는 모두 구분자로 취급
_NON_TOKEN_CHARS = re.compile(r"[^A-Za-z0-9_\s\u4e00-\u9fff]")
_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """관련도 계산용 토큰화

    - 소문자 변환
    - 단어 문자/공백/한자 이외 문자는 공백으로 치환
    - 공백 기준 분리 후 길이 1 이하 토큰 제거

    Examples:
        >>> tokenize("Rust-Lang: The Book!")
        ['rust', 'lang', 'the', 'book']
        >>> tokenize("a b 搜索引擎")
        ['搜索引擎']

    Args:
        text: 원문

    Returns:
        토큰 목록 (중복 포함, 등장 순서 유지)
    """
    if not text:
        return []
    cleaned = _NON_TOKEN_CHARS.sub(" ", text.lower())
    return [t for t in cleaned.split() if len(t) > 1]


def unique_tokens(text: str) -> list[str]:
    """중복 제거된 토큰 (등장 순서 유지)"""
    return list(dict.fromkeys(tokenize(text)))


def clean_html_text(text: str) -> str:
    """HTML 조각에서 태그 제거, 엔티티 복원, 공백 정리"""
    if not text:
        return ""
    stripped = _TAG_PATTERN.sub("", text)
    return _WHITESPACE.sub(" ", html.unescape(stripped)).strip()


def truncate(text: str, max_length: int) -> str:
    """최대 길이로 자르기"""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length]
