"""Utilities package - Flat structure (no nested directories)

렌더링(formatting)은 engine 타입에 의존하므로 여기서 re-export하지 않습니다.
"""

# URL utilities
from .url_utils import is_absolute_http_url, normalize_href, normalize_url_key, unwrap_redirect_url

# Text utilities
from .text_utils import clean_html_text, tokenize, truncate, unique_tokens

__all__ = [
    # url
    "normalize_url_key",
    "unwrap_redirect_url",
    "normalize_href",
    "is_absolute_http_url",
    # text
    "tokenize",
    "unique_tokens",
    "clean_html_text",
    "truncate",
]
