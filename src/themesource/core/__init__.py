"""Core types, models, and exceptions."""

from .exceptions import (
    ConfigurationError,
    ThemeLoadError,
    ThemeSourceCycleError,
    ThemeSourceError,
    ThemeSourceUnavailableError,
)
from .models import Theme
from .types import LookupStatus, SourceKind

__all__ = [
    # Types
    "LookupStatus",
    "SourceKind",
    # Models
    "Theme",
    # Exceptions
    "ConfigurationError",
    "ThemeLoadError",
    "ThemeSourceCycleError",
    "ThemeSourceError",
    "ThemeSourceUnavailableError",
]
