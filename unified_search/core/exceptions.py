"""커스텀 예외 정의 (Structured Exception Hierarchy)

엔진 어댑터가 발생시키는 예외는 모두 Executor 경계에서 흡수되어
ProviderResponse.error 문자열로만 노출됩니다.
"""
from typing import Any, Optional


# 기본 예외 클래스
class UnifiedSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 검색엔진 관련 예외
class ProviderException(UnifiedSearchException):
    """검색엔진 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "PROVIDER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "PROVIDER_ERROR", details)


class ProviderNotConfiguredException(ProviderException):
    """API 키 등 필수 설정이 없을 때"""
    def __init__(self, provider: str, setting: str, details: Optional[dict[str, Any]] = None):
        message = f"{setting} not configured"
        super().__init__(message, "PROVIDER_NOT_CONFIGURED",
                        details or {"provider": provider, "setting": setting})


class ProviderHTTPException(ProviderException):
    """2xx 이외의 HTTP 응답"""
    def __init__(self, provider: str, status_code: int, body: str = "", details: Optional[dict[str, Any]] = None):
        message = f"{provider} API error: {status_code}"
        if body:
            message = f"{message} - {body[:200]}"
        self.status_code = status_code
        super().__init__(message, "PROVIDER_HTTP_ERROR",
                        details or {"provider": provider, "status_code": status_code})


class ProviderNetworkException(ProviderException):
    """연결 실패/DNS 오류 등 전송 계층 오류"""
    def __init__(self, provider: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"{provider} request failed: {reason}"
        super().__init__(message, "PROVIDER_NETWORK_ERROR",
                        details or {"provider": provider, "reason": reason})


class ProviderTimeoutException(ProviderException):
    """HTTP 요청 단위 타임아웃"""
    def __init__(self, provider: str, timeout_ms: int, details: Optional[dict[str, Any]] = None):
        message = f"{provider} request timed out after {timeout_ms}ms"
        super().__init__(message, "PROVIDER_TIMEOUT",
                        details or {"provider": provider, "timeout_ms": timeout_ms})


class ParsingException(ProviderException):
    """JSON/HTML 응답 파싱 오류"""
    def __init__(self, provider: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse {provider} response: {reason}"
        super().__init__(message, "PARSING_ERROR",
                        details or {"provider": provider, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(UnifiedSearchException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)
