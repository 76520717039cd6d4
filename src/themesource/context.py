"""Wiring of theme sources into nested contexts."""

from __future__ import annotations

import logging

from themesource.core.models import Theme
from themesource.sources.base import HierarchicalThemeSource, ThemeSource
from themesource.sources.delegating import DelegatingThemeSource

logger = logging.getLogger(__name__)


def init_theme_source(
    configured: ThemeSource | None,
    parent: ThemeSource | None = None,
) -> ThemeSource:
    """
    Pick the theme source for a context.

    A configured source is used as-is; if it is hierarchical and has no
    parent yet, ``parent`` is linked in. Without a configured source a
    ``DelegatingThemeSource`` pointing at ``parent`` is returned, so
    lookups still reach the enclosing context.

    Args:
        configured: The source the context defines itself, if any
        parent: The enclosing context's source, if any

    Returns:
        The source the context should use
    """
    if configured is not None:
        if (
            parent is not None
            and isinstance(configured, HierarchicalThemeSource)
            and configured.get_parent() is None
        ):
            configured.set_parent(parent)
        logger.debug(f"Using theme source {configured!r}")
        return configured

    theme_source = DelegatingThemeSource()
    theme_source.set_parent(parent)
    logger.debug(f"No theme source configured, using placeholder {theme_source!r}")
    return theme_source


class ThemeContext:
    """
    A named scope owning one theme source.

    Nested contexts chain their sources: a child without its own source
    gets a placeholder that defers to the parent context.

    Usage:
        root = ThemeContext("app", theme_source=StaticThemeSource([...]))
        child = ThemeContext("admin", parent=root)
        child.get_theme("button")  # resolved by root's source
    """

    def __init__(
        self,
        name: str,
        theme_source: ThemeSource | None = None,
        parent: ThemeContext | None = None,
    ) -> None:
        self.name = name
        self.parent = parent
        self.theme_source = init_theme_source(
            theme_source,
            parent.theme_source if parent is not None else None,
        )

    def get_theme(self, name: str) -> Theme | None:
        """Resolve a theme through this context's source."""
        return self.theme_source.resolve(name)

    def __repr__(self) -> str:
        return f"ThemeContext(name={self.name!r}, theme_source={self.theme_source!r})"
