"""Tests for the theme source registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from themesource.chain import iter_chain
from themesource.config import ThemeSourceSettings
from themesource.core.exceptions import ConfigurationError, ThemeSourceCycleError
from themesource.core.models import Theme
from themesource.registry import ThemeSourceRegistry
from themesource.sources.delegating import DelegatingThemeSource
from themesource.sources.directory import DirectoryThemeSource
from themesource.sources.remote import RemoteThemeSource
from themesource.sources.static import StaticThemeSource


class TestThemeSourceRegistry:
    """Tests for registering and linking sources."""

    def test_empty_registry_builds_placeholder(self):
        """No sources yields a parent-less delegating source."""
        head = ThemeSourceRegistry().build()

        assert isinstance(head, DelegatingThemeSource)
        assert head.get_parent() is None
        assert head.resolve("button") is None

    def test_sources_are_linked_in_order(self, button_theme: Theme, stub_source):
        """Each source's parent is the next registered one."""
        first = StaticThemeSource([button_theme])
        registry = ThemeSourceRegistry()
        registry.register(first)
        registry.register(stub_source)

        head = registry.build()

        assert list(iter_chain(head)) == [head, first, stub_source]
        assert head.resolve("button") is button_theme
        assert head.resolve("dark").name == "dark"
        assert stub_source.calls == ["dark"]

    def test_rejects_non_source(self):
        """Objects without resolve are rejected."""
        with pytest.raises(ConfigurationError):
            ThemeSourceRegistry().register(object())

    def test_rejects_duplicate(self):
        """The same source cannot be registered twice."""
        source = StaticThemeSource()
        registry = ThemeSourceRegistry()
        registry.register(source)

        with pytest.raises(ConfigurationError):
            registry.register(source)

    def test_non_hierarchical_must_be_last(self, stub_source):
        """A plain source cannot have a parent, so nothing may follow it."""
        registry = ThemeSourceRegistry()
        registry.register(stub_source)
        registry.register(StaticThemeSource())

        with pytest.raises(ConfigurationError):
            registry.build()

    def test_detects_cycle(self):
        """A pre-existing loop behind the last source is reported."""
        a = DelegatingThemeSource()
        b = DelegatingThemeSource(a)
        a.set_parent(b)
        registry = ThemeSourceRegistry()
        registry.register(a)

        with pytest.raises(ThemeSourceCycleError):
            registry.build()

    def test_cycle_detection_can_be_disabled(self):
        """With detection off, a looping chain is built without complaint."""
        a = DelegatingThemeSource()
        b = DelegatingThemeSource(a)
        a.set_parent(b)
        registry = ThemeSourceRegistry(detect_cycles=False)
        registry.register(a)

        head = registry.build()

        assert head.get_parent() is a


class TestFromSettings:
    """Tests for ThemeSourceRegistry.from_settings."""

    def test_minimal_settings(self, mock_settings_minimal: ThemeSourceSettings):
        """No configured sources registers nothing."""
        registry = ThemeSourceRegistry.from_settings(mock_settings_minimal)

        assert registry.sources == []

    def test_all_sources(self, mock_settings: ThemeSourceSettings, theme_dir: Path):
        """Static, directory and remote sources are registered in that order."""
        registry = ThemeSourceRegistry.from_settings(mock_settings)
        static, directory, remote = registry.sources

        assert isinstance(static, StaticThemeSource)
        assert isinstance(directory, DirectoryThemeSource)
        assert directory.directory == theme_dir
        assert isinstance(remote, RemoteThemeSource)
        assert remote.base_url == "https://themes.example.com"
        assert remote.timeout == 5.0
        registry.close_all()

    def test_built_chain_resolves_across_sources(self, mock_settings: ThemeSourceSettings):
        """Static and directory themes are both reachable from the head."""
        settings = mock_settings.model_copy(update={"remote_url": None})
        head = ThemeSourceRegistry.from_settings(settings).build()

        assert head.resolve("button") == Theme(name="button", stylesheet="/css/button.css")
        assert head.resolve("ocean").stylesheet == "/css/ocean.css"
        assert head.resolve("missing") is None

    def test_prefix_is_passed(self, tmp_path: Path):
        """The file prefix setting reaches the directory source."""
        settings = ThemeSourceSettings(theme_dir=tmp_path, theme_file_prefix="theme-")
        (directory,) = ThemeSourceRegistry.from_settings(settings).sources

        assert directory.prefix == "theme-"

    def test_detect_cycles_setting(self, mock_settings_minimal: ThemeSourceSettings):
        """The detect_cycles setting is carried over."""
        settings = mock_settings_minimal.model_copy(update={"detect_cycles": False})

        assert ThemeSourceRegistry.from_settings(settings).detect_cycles is False
