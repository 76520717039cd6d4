"""Theme source implementations."""

from themesource.sources.base import (
    AbstractThemeSource,
    HierarchicalThemeSource,
    ThemeSource,
)
from themesource.sources.delegating import DelegatingThemeSource
from themesource.sources.directory import DirectoryThemeSource
from themesource.sources.remote import RemoteThemeSource
from themesource.sources.static import StaticThemeSource

__all__ = [
    # Capabilities
    "AbstractThemeSource",
    "HierarchicalThemeSource",
    "ThemeSource",
    # Sources
    "DelegatingThemeSource",
    "DirectoryThemeSource",
    "RemoteThemeSource",
    "StaticThemeSource",
]
