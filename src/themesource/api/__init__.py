"""FastAPI application and routes."""

from themesource.api.app import app, create_app

__all__ = [
    "app",
    "create_app",
]
