"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from themesource.api.app import create_app
from themesource.core.models import Theme
from themesource.sources.delegating import DelegatingThemeSource
from themesource.sources.static import StaticThemeSource


@pytest.fixture
def served_source(button_theme: Theme, dark_theme: Theme) -> DelegatingThemeSource:
    """The chain served by the test app: placeholder -> static themes."""
    return DelegatingThemeSource(StaticThemeSource([button_theme, dark_theme]))


@pytest.fixture
def test_app(served_source: DelegatingThemeSource, mock_settings_minimal) -> FastAPI:
    """Create an app serving an injected source chain."""
    return create_app(theme_source=served_source, settings=mock_settings_minimal)


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
