"""URL 파싱 유틸리티"""
from typing import Optional
from urllib.parse import urlsplit, parse_qs, unquote


def normalize_url_key(url: str) -> str:
    """
    중복 제거용 URL 키 생성

    호스트(www. 제거) + 경로(끝 슬래시 1개 제거)만 남기고 소문자로 변환합니다.
    스킴/포트/쿼리/프래그먼트는 버립니다.

    Examples:
        >>> normalize_url_key("https://www.rust-lang.org/")
        'rust-lang.org'
        >>> normalize_url_key("http://Example.com/Docs/?a=1#top")
        'example.com/docs'
        >>> normalize_url_key("not a url")
        'not a url'

    Args:
        url: 엔진이 준 URL

    Returns:
        정규화 키. 파싱할 수 없는 URL(스킴/호스트 없음)은 소문자 원문 그대로
    """
    if not url:
        return ""

    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
    except ValueError:
        return url.lower()

    if not parsed.scheme or not hostname:
        return url.lower()

    if hostname.startswith("www."):
        hostname = hostname[len("www."):]

    normalized = hostname + parsed.path
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized.lower()


def unwrap_redirect_url(href: str, param: str = "uddg") -> str:
    """
    리다이렉트 링크에서 실제 목적지 URL 추출

    DuckDuckGo HTML 결과는 "//duckduckgo.com/l/?uddg=<encoded>&rut=..." 형태입니다.

    Examples:
        >>> unwrap_redirect_url("//duckduckgo.com/l/?uddg=https%3A%2F%2Frust-lang.org%2F&rut=x")
        'https://rust-lang.org/'
        >>> unwrap_redirect_url("https://rust-lang.org/")
        'https://rust-lang.org/'

    Args:
        href: a 태그의 href
        param: 목적지를 담은 쿼리 파라미터 이름

    Returns:
        목적지 URL (리다이렉트가 아니면 href 그대로)
    """
    if not href or f"{param}=" not in href:
        return href

    try:
        query = urlsplit(href).query
        values = parse_qs(query).get(param)
        if values and values[0]:
            return values[0]
    except ValueError:
        pass

    # Fallback: 쿼리 파싱이 안 되는 비정상 href
    tail = href.split(f"{param}=", 1)[1]
    return unquote(tail.split("&", 1)[0])


def normalize_href(href: str, base_url: str = "https://duckduckgo.com") -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path" -> "{base_url}/path"
    - "http(s)://..." -> 그대로
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if h.startswith("/"):
        return f"{base_url}{h}"

    return h


def is_absolute_http_url(url: Optional[str]) -> bool:
    """http(s) 절대 URL 여부"""
    if not url:
        return False
    return url.startswith(("http://", "https://"))
