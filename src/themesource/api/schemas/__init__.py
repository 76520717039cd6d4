"""API request/response schemas."""

from themesource.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from themesource.api.schemas.responses import (
    HealthResponse,
    ThemeResponse,
    ThemeStatusResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "HealthResponse",
    "ThemeResponse",
    "ThemeStatusResponse",
]
