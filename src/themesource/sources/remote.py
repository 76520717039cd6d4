"""Theme source backed by an HTTP theme service."""

from __future__ import annotations

import logging
from typing import ClassVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from themesource.core.exceptions import ThemeSourceUnavailableError
from themesource.core.models import Theme
from themesource.core.types import SourceKind
from themesource.sources.base import AbstractThemeSource, ThemeSource

logger = logging.getLogger(__name__)


class RemoteThemeSource(AbstractThemeSource):
    """
    Resolves themes from ``GET {base_url}/themes/{name}``.

    A 404 is a miss and falls back to the parent. Any other failure raises
    ``ThemeSourceUnavailableError``.
    """

    SOURCE_KIND: ClassVar[SourceKind] = SourceKind.REMOTE

    def __init__(
        self,
        base_url: str,
        parent: ThemeSource | None = None,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(parent)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "themesource/0.1",
            "Accept": "application/json",
        }

    def resolve(self, name: str) -> Theme | None:
        theme = self._fetch(name)
        if theme is not None:
            return theme
        return self._resolve_from_parent(name)

    def path_for(self, name: str) -> str | None:
        """Return the request path for ``name``, or None if the name is unusable.

        Empty and dot-segment names cannot be sent as a single path segment.
        """
        if name in ("", ".", ".."):
            return None
        return f"/themes/{quote(name, safe='')}"

    def _fetch(self, name: str) -> Theme | None:
        url = self.path_for(name)
        if url is None:
            logger.debug(f"Rejected theme name {name!r} for remote lookup")
            return None
        try:
            response = self._get_client().get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Theme service {self.base_url} unreachable: {e}")
            raise ThemeSourceUnavailableError(
                message=f"HTTP error: {e}",
                source=self.base_url,
            ) from e

        if response.status_code == 404:
            return None

        if not response.is_success:
            logger.warning(
                f"Theme service {self.base_url} returned {response.status_code} for {name!r}"
            )
            raise ThemeSourceUnavailableError(
                message=f"Theme service returned HTTP {response.status_code}",
                source=self.base_url,
                status_code=response.status_code,
            )

        try:
            return Theme.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ThemeSourceUnavailableError(
                message=f"Malformed theme payload for {name!r}: {e}",
                source=self.base_url,
                status_code=response.status_code,
            ) from e

    def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._client is not None and self._owns_client:
            if not self._client.is_closed:
                self._client.close()
            self._client = None
