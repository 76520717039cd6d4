"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from themesource.api.schemas.base import APIBaseSchema
from themesource.core.models import Theme
from themesource.core.types import LookupStatus


class ThemeResponse(APIBaseSchema):
    """A resolved theme."""

    name: str
    stylesheet: str | None = None
    properties: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_theme(cls, theme: Theme) -> ThemeResponse:
        return cls(name=theme.name, stylesheet=theme.stylesheet, properties=dict(theme.properties))


class ThemeStatusResponse(APIBaseSchema):
    """Whether a theme name resolves."""

    name: str
    status: LookupStatus


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    chain_depth: int | None = None
