"""Theme lookup endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from themesource.api.dependencies import Themes
from themesource.api.schemas import APIError, ErrorDetail, ThemeResponse, ThemeStatusResponse
from themesource.core.types import LookupStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/themes", tags=["themes"])


def _not_found(name: str) -> JSONResponse:
    error = APIError(
        error=ErrorDetail(
            code="theme_not_found",
            message=f"No theme named {name!r}",
        )
    )
    return JSONResponse(status_code=404, content=error.model_dump(by_alias=True))


@router.get(
    "/{name}",
    response_model=ThemeResponse,
    responses={404: {"model": APIError}, 502: {"model": APIError}},
    operation_id="getTheme",
    summary="Resolve a theme",
    description="Resolve a theme by name through the configured source chain.",
)
def get_theme(name: str, theme_source: Themes) -> ThemeResponse | JSONResponse:
    """Resolve a theme by name."""
    theme = theme_source.resolve(name)
    if theme is None:
        return _not_found(name)
    return ThemeResponse.from_theme(theme)


@router.get(
    "/{name}/status",
    response_model=ThemeStatusResponse,
    responses={502: {"model": APIError}},
    operation_id="getThemeStatus",
    summary="Check a theme name",
    description="Report whether a theme name resolves, without returning its content.",
)
def get_theme_status(name: str, theme_source: Themes) -> ThemeStatusResponse:
    """Report whether a theme resolves."""
    theme = theme_source.resolve(name)
    return ThemeStatusResponse(
        name=name,
        status=LookupStatus.FOUND if theme is not None else LookupStatus.NOT_FOUND,
    )
