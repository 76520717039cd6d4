"""In-memory theme source."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import ClassVar

from themesource.core.models import Theme
from themesource.core.types import SourceKind
from themesource.sources.base import AbstractThemeSource, ThemeSource


class StaticThemeSource(AbstractThemeSource):
    """
    Theme source backed by a dictionary of themes.

    Local themes win; unknown names fall back to the parent.
    """

    SOURCE_KIND: ClassVar[SourceKind] = SourceKind.STATIC

    def __init__(
        self,
        themes: Mapping[str, Theme] | Iterable[Theme] | None = None,
        parent: ThemeSource | None = None,
    ) -> None:
        super().__init__(parent)
        self._themes: dict[str, Theme] = {}
        if isinstance(themes, Mapping):
            self._themes.update(themes)
        elif themes is not None:
            for theme in themes:
                self.add_theme(theme)

    @classmethod
    def from_stylesheets(
        cls,
        stylesheets: Mapping[str, str],
        parent: ThemeSource | None = None,
    ) -> StaticThemeSource:
        """Build a source from a ``name -> stylesheet`` mapping."""
        return cls(
            [Theme(name=name, stylesheet=path) for name, path in stylesheets.items()],
            parent=parent,
        )

    @property
    def names(self) -> list[str]:
        """Names of the locally held themes, sorted."""
        return sorted(self._themes)

    def add_theme(self, theme: Theme) -> None:
        """Add or replace a theme under its own name."""
        self._themes[theme.name] = theme

    def remove_theme(self, name: str) -> Theme | None:
        """Remove a theme, returning it if it was present."""
        return self._themes.pop(name, None)

    def resolve(self, name: str) -> Theme | None:
        theme = self._themes.get(name)
        if theme is not None:
            return theme
        return self._resolve_from_parent(name)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, name: object) -> bool:
        return name in self._themes
