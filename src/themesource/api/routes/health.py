"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from themesource import __version__
from themesource.api.schemas import HealthResponse
from themesource.chain import chain_depth
from themesource.core.exceptions import ThemeSourceCycleError
from themesource.sources.delegating import DelegatingThemeSource

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its theme source chain.",
)
def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
    depth: int | None = None

    theme_source = getattr(request.app.state, "theme_source", None)
    if theme_source is None:
        status = "unhealthy"
    else:
        try:
            depth = chain_depth(theme_source)
        except ThemeSourceCycleError:
            status = "unhealthy"
        else:
            # A bare placeholder: every lookup is a miss.
            if (
                isinstance(theme_source, DelegatingThemeSource)
                and theme_source.get_parent() is None
            ):
                status = "degraded"

    return HealthResponse(status=status, version=__version__, chain_depth=depth)


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    return {"ready": getattr(request.app.state, "theme_source", None) is not None}
