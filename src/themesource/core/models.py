"""Domain models for themes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Theme(BaseModel):
    """A named bundle of theme resources.

    Themes are plain values: two themes with the same fields compare equal
    and hash alike. ``properties`` is a read-only view.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Symbolic theme name")
    stylesheet: str | None = Field(default=None, description="Stylesheet location")
    properties: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Free-form theme values (colours, fonts, ...)",
    )

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("properties")
    def _serialize_properties(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((self.name, self.stylesheet, frozenset(self.properties.items())))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return a theme property, or ``default`` when it is not defined."""
        return self.properties.get(key, default)
