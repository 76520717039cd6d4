"""Theme source that holds no themes and defers to its parent."""

from __future__ import annotations

from typing import ClassVar

from themesource.core.models import Theme
from themesource.core.types import SourceKind
from themesource.sources.base import AbstractThemeSource


class DelegatingThemeSource(AbstractThemeSource):
    """
    Empty theme source that delegates every lookup to its parent.

    Without a parent it resolves nothing. Used as the placeholder source
    when a context does not configure one of its own (see
    ``themesource.context.init_theme_source``).

    The parent result is returned as-is, including ``None``, and exceptions
    raised by the parent propagate unchanged. No cycle check is made on
    ``set_parent``; use ``themesource.chain.check_acyclic`` where needed.
    """

    SOURCE_KIND: ClassVar[SourceKind] = SourceKind.DELEGATING

    def resolve(self, name: str) -> Theme | None:
        return self._resolve_from_parent(name)
