"""헬스 체크 엔드포인트"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from unified_search import __version__
from unified_search.core.config import Settings
from unified_search.schemas.search_schema import HealthResponse

from .dependencies import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(app_settings: Settings = Depends(get_settings)):
    """헬스 체크 엔드포인트 (외부 의존성 없음)"""
    return HealthResponse(
        status="healthy",
        service=app_settings.api_title,
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/")
async def root(app_settings: Settings = Depends(get_settings)):
    """루트 엔드포인트"""
    return {
        "service": app_settings.api_title,
        "version": __version__,
        "description": app_settings.api_description,
        "endpoints": {
            "search": "/api/v1/search",
            "quick_search": "/api/v1/search/quick",
            "engines_status": "/api/v1/engines/status",
            "health": "/health",
        },
        "engines": ["duckduckgo", "searxng", "exa", "tavily", "metaso", "jina"],
        "docs": "/docs",
    }
