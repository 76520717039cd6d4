"""Core enums and type definitions."""

from enum import StrEnum


class SourceKind(StrEnum):
    """Kinds of theme sources shipped with the package."""

    DELEGATING = "delegating"
    STATIC = "static"
    DIRECTORY = "directory"
    REMOTE = "remote"


class LookupStatus(StrEnum):
    """Outcome of a theme lookup as reported by the API."""

    FOUND = "found"
    NOT_FOUND = "not_found"
