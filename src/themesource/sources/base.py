"""Theme source capabilities and the shared hierarchical base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from themesource.core.models import Theme
from themesource.core.types import SourceKind


@runtime_checkable
class ThemeSource(Protocol):
    """Anything that can resolve a theme by name.

    Returns ``None`` when the theme is unknown. Absence is not an error.
    """

    def resolve(self, name: str) -> Theme | None:
        ...


@runtime_checkable
class HierarchicalThemeSource(ThemeSource, Protocol):
    """A theme source that can be linked to a parent source."""

    def get_parent(self) -> ThemeSource | None:
        ...

    def set_parent(self, parent: ThemeSource | None) -> None:
        ...


class AbstractThemeSource(ABC):
    """
    Base class for the theme sources shipped with the package.

    Provides:
    - A single, non-owning parent reference (``None`` until set)
    - Parent fallback for subclasses
    - No-op resource management hooks
    """

    SOURCE_KIND: ClassVar[SourceKind]

    def __init__(self, parent: ThemeSource | None = None) -> None:
        self._parent: ThemeSource | None = parent

    @property
    def source_kind(self) -> SourceKind:
        """The kind of this source."""
        return self.SOURCE_KIND

    def get_parent(self) -> ThemeSource | None:
        """Return the parent source, or ``None`` if none is configured."""
        return self._parent

    def set_parent(self, parent: ThemeSource | None) -> None:
        """Replace the parent source. ``None`` clears it."""
        self._parent = parent

    @property
    def parent(self) -> ThemeSource | None:
        return self.get_parent()

    @parent.setter
    def parent(self, parent: ThemeSource | None) -> None:
        self.set_parent(parent)

    def _resolve_from_parent(self, name: str) -> Theme | None:
        """Forward a lookup to the parent, or return ``None`` without one."""
        # Read the field once so a concurrent set_parent cannot split check and call.
        parent = self._parent
        if parent is not None:
            return parent.resolve(name)
        return None

    @abstractmethod
    def resolve(self, name: str) -> Theme | None:
        """
        Resolve a theme by name.

        Args:
            name: The symbolic theme name, forwarded as-is

        Returns:
            The theme if found, None otherwise
        """
        ...

    def close(self) -> None:
        """Release resources held by this source."""

    def __enter__(self) -> AbstractThemeSource:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        parent = type(self._parent).__name__ if self._parent is not None else None
        return f"{type(self).__name__}(parent={parent})"
