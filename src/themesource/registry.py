"""Registry for assembling theme sources into a chain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from themesource.chain import check_acyclic
from themesource.core.exceptions import ConfigurationError
from themesource.sources.base import AbstractThemeSource, HierarchicalThemeSource, ThemeSource
from themesource.sources.delegating import DelegatingThemeSource

if TYPE_CHECKING:
    from themesource.config import ThemeSourceSettings

logger = logging.getLogger(__name__)


class ThemeSourceRegistry:
    """
    Factory for assembling theme sources into a parent chain.

    Sources are consulted in registration order: each hierarchical source
    gets the next registered source as its parent. The chain is fronted by
    a ``DelegatingThemeSource`` so it can be re-parented in one place.
    """

    def __init__(self, *, detect_cycles: bool = True) -> None:
        self._sources: list[ThemeSource] = []
        self.detect_cycles = detect_cycles

    @property
    def sources(self) -> list[ThemeSource]:
        """Registered sources, in lookup order."""
        return list(self._sources)

    def register(self, source: ThemeSource) -> None:
        """Register a source after the ones already registered."""
        if not isinstance(source, ThemeSource):
            raise ConfigurationError(
                f"{type(source).__name__} does not implement resolve(name)"
            )
        if any(existing is source for existing in self._sources):
            raise ConfigurationError(f"{source!r} is already registered")
        self._sources.append(source)

    def build(self) -> DelegatingThemeSource:
        """
        Link the registered sources and return the head of the chain.

        Raises:
            ConfigurationError: If a non-hierarchical source is followed by
                further sources, which it could never reach
        """
        for index, source in enumerate(self._sources[:-1]):
            if not isinstance(source, HierarchicalThemeSource):
                raise ConfigurationError(
                    f"{type(source).__name__} cannot have a parent and must be registered last"
                )
            source.set_parent(self._sources[index + 1])

        head = DelegatingThemeSource()
        head.set_parent(self._sources[0] if self._sources else None)

        if self.detect_cycles:
            check_acyclic(head)

        logger.info(
            "Theme source chain: "
            + " -> ".join(type(source).__name__ for source in [head, *self._sources])
        )
        return head

    @classmethod
    def from_settings(cls, settings: ThemeSourceSettings) -> ThemeSourceRegistry:
        """
        Create a registry with sources configured from settings.

        Registers, in order: in-memory themes, the theme directory, and the
        remote theme service, each only when configured.
        """
        registry = cls(detect_cycles=settings.detect_cycles)

        if settings.themes:
            from themesource.sources.static import StaticThemeSource

            registry.register(StaticThemeSource.from_stylesheets(settings.themes))

        if settings.theme_dir is not None:
            from themesource.sources.directory import DirectoryThemeSource

            if not settings.theme_dir.is_dir():
                logger.warning(f"Theme directory {settings.theme_dir} does not exist")
            registry.register(
                DirectoryThemeSource(settings.theme_dir, prefix=settings.theme_file_prefix)
            )

        if settings.remote_url:
            from themesource.sources.remote import RemoteThemeSource

            registry.register(
                RemoteThemeSource(settings.remote_url, timeout=settings.remote_timeout)
            )

        return registry

    def close_all(self) -> None:
        """Close all registered sources that hold resources."""
        for source in self._sources:
            if isinstance(source, AbstractThemeSource):
                source.close()
