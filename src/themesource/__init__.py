"""Themesource - Hierarchical, delegating resolution of named themes."""

from themesource.context import ThemeContext, init_theme_source
from themesource.core.exceptions import ThemeSourceError
from themesource.core.models import Theme
from themesource.registry import ThemeSourceRegistry
from themesource.sources import (
    DelegatingThemeSource,
    DirectoryThemeSource,
    HierarchicalThemeSource,
    RemoteThemeSource,
    StaticThemeSource,
    ThemeSource,
)

__version__ = "0.1.0"
__all__ = [
    # Capabilities
    "HierarchicalThemeSource",
    "ThemeSource",
    # Sources
    "DelegatingThemeSource",
    "DirectoryThemeSource",
    "RemoteThemeSource",
    "StaticThemeSource",
    # Wiring
    "ThemeContext",
    "ThemeSourceRegistry",
    "init_theme_source",
    # Models
    "Theme",
    "ThemeSourceError",
    # Version
    "__version__",
]
