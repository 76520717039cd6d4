"""Custom exception hierarchy for themesource."""

from typing import Any


class ThemeSourceError(Exception):
    """Base exception for all themesource errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ThemeSourceError):
    """Theme source wiring or settings are invalid."""

    pass


class ThemeLoadError(ThemeSourceError):
    """A theme document could not be read or validated."""

    def __init__(
        self,
        message: str,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.name = name


class ThemeSourceUnavailableError(ThemeSourceError):
    """A remote theme backend is unavailable."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class ThemeSourceCycleError(ThemeSourceError):
    """A parent chain loops back on itself."""

    def __init__(
        self,
        message: str,
        chain: list[Any],
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.chain = chain
