"""API route modules."""

from themesource.api.routes.health import router as health_router
from themesource.api.routes.themes import router as themes_router

__all__ = [
    "health_router",
    "themes_router",
]
