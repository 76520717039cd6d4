"""Theme source reading JSON theme documents from a directory."""

from __future__ import annotations

import errno
import json
import logging
import threading
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError

from themesource.core.exceptions import ThemeLoadError
from themesource.core.models import Theme
from themesource.core.types import SourceKind
from themesource.sources.base import AbstractThemeSource, ThemeSource

logger = logging.getLogger(__name__)


class DirectoryThemeSource(AbstractThemeSource):
    """
    Loads themes from ``<directory>/<prefix><name>.json``.

    A document looks like::

        {"stylesheet": "/css/button.css", "properties": {"accent": "#0af"}}

    ``name`` may be omitted; the requested name is used. Missing documents
    fall back to the parent. Loaded themes are kept per instance unless
    ``cache_themes`` is disabled.
    """

    SOURCE_KIND: ClassVar[SourceKind] = SourceKind.DIRECTORY
    SUFFIX: ClassVar[str] = ".json"

    def __init__(
        self,
        directory: Path | str,
        prefix: str = "",
        parent: ThemeSource | None = None,
        *,
        cache_themes: bool = True,
    ) -> None:
        super().__init__(parent)
        self.directory = Path(directory)
        self.prefix = prefix
        self.cache_themes = cache_themes
        self._cache: dict[str, Theme] = {}
        self._lock = threading.Lock()

    def path_for(self, name: str) -> Path | None:
        """Return the document path for ``name``, or None if the name is unusable."""
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            return None
        return self.directory / f"{self.prefix}{name}{self.SUFFIX}"

    def resolve(self, name: str) -> Theme | None:
        theme = self._load(name)
        if theme is not None:
            return theme
        return self._resolve_from_parent(name)

    def _load(self, name: str) -> Theme | None:
        """Load a theme document, returning None when there is none."""
        if self.cache_themes:
            with self._lock:
                cached = self._cache.get(name)
            if cached is not None:
                return cached

        path = self.path_for(name)
        if path is None:
            logger.debug(f"Rejected theme name {name!r} for directory lookup")
            return None
        try:
            if not path.is_file():
                return None
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                logger.debug(f"Theme name too long for directory lookup: {name[:40]!r}...")
                return None
            raise ThemeLoadError(
                message=f"Could not read theme document {path}: {e}",
                name=name,
                details={"path": str(path)},
            ) from e

        data = _parse_document(raw, name, path)
        data.setdefault("name", name)
        try:
            theme = Theme.model_validate(data)
        except ValidationError as e:
            raise ThemeLoadError(
                message=f"Invalid theme document {path}: {e.error_count()} error(s)",
                name=name,
                details={"path": str(path), "errors": e.errors(include_url=False)},
            ) from e

        logger.debug(f"Loaded theme {name!r} from {path}")
        if self.cache_themes:
            with self._lock:
                self._cache[name] = theme
        return theme

    def clear_cache(self) -> None:
        """Drop all loaded themes."""
        with self._lock:
            self._cache.clear()


def _parse_document(raw: str, name: str, path: Path) -> dict[str, Any]:
    """Decode a theme document into a JSON object."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ThemeLoadError(
            message=f"Invalid theme document {path}: {e}",
            name=name,
            details={"path": str(path)},
        ) from e
    if not isinstance(data, dict):
        raise ThemeLoadError(
            message=f"Invalid theme document {path}: expected a JSON object",
            name=name,
            details={"path": str(path)},
        )
    return data
