"""API routes package."""

from .engine_routes import router as engine_router
from .health_routes import router as health_router
from .search_routes import router as search_router

__all__ = ["health_router", "search_router", "engine_router"]
