"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThemeSourceSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="THEMESOURCE_",
    )

    # In-memory themes
    themes: dict[str, str] = Field(
        default_factory=dict,
        description="Theme name to stylesheet mapping (JSON in the environment)",
    )

    # Directory-backed themes
    theme_dir: Path | None = Field(
        default=None,
        description="Directory holding <prefix><name>.json theme documents",
    )
    theme_file_prefix: str = Field(
        default="",
        description="File name prefix for theme documents",
    )

    # Remote theme service
    remote_url: str | None = Field(
        default=None,
        description="Base URL of an HTTP theme service (optional)",
    )
    remote_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds for theme service requests",
    )

    # Chain assembly
    detect_cycles: bool = Field(
        default=True,
        description="Reject source chains that loop back on themselves",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> ThemeSourceSettings:
    """Get cached settings instance."""
    return ThemeSourceSettings()
