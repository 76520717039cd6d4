"""Shared test fixtures for all tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from themesource.config import ThemeSourceSettings
from themesource.core.models import Theme

# ============================================================================
# Test Doubles
# ============================================================================


class StubThemeSource:
    """Non-hierarchical theme source returning canned themes.

    Records every requested name so tests can check what was forwarded.
    """

    def __init__(self, themes: dict[str, Theme] | None = None) -> None:
        self.themes = dict(themes or {})
        self.calls: list[str] = []

    def resolve(self, name: str) -> Theme | None:
        self.calls.append(name)
        return self.themes.get(name)


class FailingThemeSource:
    """Theme source whose lookups always raise."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def resolve(self, name: str) -> Theme | None:
        raise self.error


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def button_theme() -> Theme:
    """The theme used throughout the examples."""
    return Theme(name="button", stylesheet="/css/button.css")


@pytest.fixture
def dark_theme() -> Theme:
    """A theme with properties."""
    return Theme(
        name="dark",
        stylesheet="/css/dark.css",
        properties={"background": "#111111", "foreground": "#eeeeee"},
    )


@pytest.fixture
def make_stub_source():
    """Factory for stub sources: ``make_stub_source({"name": theme, ...})``."""
    return StubThemeSource


@pytest.fixture
def make_failing_source():
    """Factory for sources that raise: ``make_failing_source(exc)``."""
    return FailingThemeSource


@pytest.fixture
def stub_source(button_theme: Theme, dark_theme: Theme) -> StubThemeSource:
    """A stub source knowing "button" and "dark"."""
    return StubThemeSource({"button": button_theme, "dark": dark_theme})


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    """A directory holding a few theme documents."""
    directory = tmp_path / "themes"
    directory.mkdir()
    (directory / "ocean.json").write_text(
        json.dumps({"stylesheet": "/css/ocean.css", "properties": {"accent": "#0077be"}}),
        encoding="utf-8",
    )
    (directory / "named.json").write_text(
        json.dumps({"name": "named-in-file", "stylesheet": "/css/named.css"}),
        encoding="utf-8",
    )
    (directory / "broken.json").write_text("{not json", encoding="utf-8")
    (directory / "list.json").write_text("[1, 2, 3]", encoding="utf-8")
    (directory / "bad-types.json").write_text(
        json.dumps({"properties": "not-a-mapping"}), encoding="utf-8"
    )
    return directory


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings(theme_dir: Path) -> ThemeSourceSettings:
    """Create settings with every source configured."""
    return ThemeSourceSettings(
        themes={"button": "/css/button.css"},
        theme_dir=theme_dir,
        remote_url="https://themes.example.com",
        remote_timeout=5.0,
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> ThemeSourceSettings:
    """Create settings with no sources configured."""
    return ThemeSourceSettings(
        themes={},
        theme_dir=None,
        remote_url=None,
    )
