"""로깅 설정 (Security Enhanced)

- 서비스 로거는 "unified_search" 하나만 사용합니다.
- 엔진 에러 본문과 요청 헤더에는 API 키가 반사될 수 있으므로
  로그로 내보내기 전에 sanitize_for_log()로 키 값만 가립니다.
"""
import logging
import os
import re
import sys
from typing import Optional

from unified_search.core.config import settings


LOGGER_NAME = "unified_search"
MASK = "***"

# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

# "Bearer xxx", "api_key=xxx", "x-api-key: xxx", '"api_key": "xxx"' 등에서 값 부분만 치환
_SECRET_PATTERNS = [
    re.compile(r"(?i)(bearer\s+)[^\s\"',]+"),
    re.compile(r"(?i)((?:x-)?api[_-]?key\"?\s*[:=]\s*\"?)[^\s\"',&]+"),
    re.compile(r"(?i)((?:access_)?token\"?\s*[:=]\s*\"?)[^\s\"',&]+"),
    re.compile(r"(?i)(password\"?\s*[:=]\s*\"?)[^\s\"',&]+"),
]


def resolve_log_level(level: Optional[str] = None) -> int:
    """설정 문자열 → logging 레벨 (Production에서는 DEBUG를 INFO로 올림)"""
    name = (level or settings.log_level).upper()
    if IS_PRODUCTION and name == "DEBUG":
        name = "INFO"
    return getattr(logging, name, logging.INFO)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """서비스 로거 초기화 (여러 번 호출해도 핸들러는 하나)"""
    service_logger = logging.getLogger(LOGGER_NAME)
    log_level = resolve_log_level(level)
    service_logger.setLevel(log_level)

    if not service_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PRODUCTION_FORMAT if IS_PRODUCTION else _DEVELOPMENT_FORMAT,
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        service_logger.addHandler(handler)

    for handler in service_logger.handlers:
        handler.setLevel(log_level)

    # 엔진 HTTP 호출마다 찍히는 전송 계층 로그는 경고 이상만
    logging.getLogger("curl_cffi").setLevel(max(log_level, logging.WARNING))

    return service_logger


logger = setup_logging()


def _configured_secrets() -> list[str]:
    keys = (
        settings.exa_api_key,
        settings.tavily_api_key,
        settings.jina_api_key,
        settings.metaso_api_key,
    )
    return [key for key in keys if key]


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """민감 정보 제거 후 로깅용 문자열 반환

    메시지 전체를 버리지 않고 키 값 부분만 가려서, 엔진 에러의 원인은
    로그에 남도록 합니다. 설정된 API 키 문자열은 위치와 무관하게 가립니다.

    Examples:
        >>> sanitize_for_log("Authorization: Bearer sk-123")
        'Authorization: Bearer ***'

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이 (초과분은 "..."로 생략)

    Returns:
        마스킹된 문자열
    """
    if not value:
        return "[empty]"

    result = str(value)
    for secret in _configured_secrets():
        result = result.replace(secret, MASK)
    for pattern in _SECRET_PATTERNS:
        result = pattern.sub(lambda m: m.group(1) + MASK, result)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
