"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from themesource.sources.base import ThemeSource


def get_theme_source(request: Request) -> ThemeSource:
    """Get the theme source chain from app state."""
    return request.app.state.theme_source


# Type aliases for cleaner dependency injection
Themes = Annotated[ThemeSource, Depends(get_theme_source)]
