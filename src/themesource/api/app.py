"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from themesource import __version__
from themesource.api.routes import health_router, themes_router
from themesource.api.schemas import APIError, ErrorDetail
from themesource.config import ThemeSourceSettings, get_settings
from themesource.core.exceptions import (
    ThemeLoadError,
    ThemeSourceError,
    ThemeSourceUnavailableError,
)
from themesource.sources.base import ThemeSource

logger = logging.getLogger(__name__)


def _error_code(exc: ThemeSourceError) -> str:
    if isinstance(exc, ThemeSourceUnavailableError):
        return "theme_source_unavailable"
    if isinstance(exc, ThemeLoadError):
        return "theme_load_error"
    return "theme_source_error"


async def theme_source_error_handler(request: Request, exc: ThemeSourceError) -> JSONResponse:
    """Render theme source failures as structured API errors."""
    logger.error(f"Theme lookup {request.url.path} failed: {exc.message}")
    error = APIError(error=ErrorDetail(code=_error_code(exc), message=exc.message))
    return JSONResponse(status_code=502, content=error.model_dump(by_alias=True))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the theme source chain from settings unless one was injected
    through ``create_app``, and closes it on shutdown.
    """
    settings: ThemeSourceSettings = app.state.settings
    logging.getLogger("themesource").setLevel(settings.log_level.upper())

    registry = None
    if getattr(app.state, "theme_source", None) is None:
        from themesource.registry import ThemeSourceRegistry

        logger.info("Initializing theme source registry...")
        registry = ThemeSourceRegistry.from_settings(settings)
        app.state.theme_source = registry.build()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if registry is not None:
        registry.close_all()
        app.state.theme_source = None
    logger.info("Application shutdown complete")


def create_app(
    *,
    theme_source: ThemeSource | None = None,
    settings: ThemeSourceSettings | None = None,
    title: str = "Theme Source API",
    description: str = "Hierarchical theme resolution API",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        theme_source: Source chain to serve; built from settings at startup if omitted
        settings: Application settings; loaded from the environment if omitted
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings
    app.state.theme_source = theme_source

    # Configure CORS
    if cors_origins is None:
        cors_origins = ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ThemeSourceError, theme_source_error_handler)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(themes_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
