"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from status_service.config import Settings
from status_service.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Deterministic settings for tests."""
    return Settings(
        app_version="2.4.1",
        build_date="2024-05-01T12:00:00.000Z",
        commit_sha="0123456789abcdef0123",
        port=9090,
        app_author="Ops Team",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application bound to the test settings."""
    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Create an async test client for the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
