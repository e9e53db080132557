"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 검색엔진 API 키 (비어 있으면 해당 엔진은 비활성화)
    exa_api_key: str = ""
    tavily_api_key: str = ""
    jina_api_key: str = ""
    metaso_api_key: str = ""

    # SearXNG 인스턴스 (키 불필요, 자체 호스팅 권장)
    searxng_url: str = "https://searx.be"

    # 엔진 실행 타임아웃
    # - default_timeout_ms: 일반 검색 요청에서 엔진별 타임아웃
    # - diagnostic_timeout_ms: 상태 점검(probe) 요청에서 사용하는 짧은 타임아웃
    default_timeout_ms: int = 8000
    diagnostic_timeout_ms: int = 3000

    # 요청에 max_results가 없을 때 사용할 기본값
    max_results: int = 20

    # 공유 HTTP 클라이언트 (curl_cffi)
    http_impersonate: str = "chrome110"
    http_max_clients: int = 20
    http_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # API
    api_title: str = "Unified Search"
    api_version: str = "1.0.0"
    api_description: str = "여러 검색엔진 결과를 중복 제거 후 관련도 순으로 집계합니다."

    # 엔진 타임아웃 + 집계 시간보다 약간 길게 서버 하드 캡을 둡니다.
    api_search_timeout_s: float = 12.0

    # 로깅
    log_level: str = "INFO"

    @field_validator("default_timeout_ms", "diagnostic_timeout_ms")
    @classmethod
    def validate_timeouts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        if not 1 <= v <= 50:
            raise ValueError("max_results must be between 1 and 50")
        return v

    @field_validator("http_max_clients")
    @classmethod
    def validate_http_max_clients(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("http_max_clients must be positive")
        return v

    @field_validator("api_search_timeout_s")
    @classmethod
    def validate_api_search_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("api_search_timeout_s must be positive")
        return v

    @field_validator("searxng_url")
    @classmethod
    def validate_searxng_url(cls, v: str) -> str:
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("searxng_url must start with http:// or https://")
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
