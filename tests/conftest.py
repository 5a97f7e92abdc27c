"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.database import create_tables
from app.main import create_app

# --- Test settings (SQLite file per test) ---


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        app_env="production",
        debug=False,
        database_url=SecretStr(f"sqlite+aiosqlite:///{tmp_path / 'sessions.db'}"),
    )


# --- App & client fixtures ---


@pytest.fixture
async def application(test_settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Create an application with all tables in place."""
    application = create_app(test_settings)
    await create_tables(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest.fixture
async def async_client(application: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the application."""
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# --- DB session for tests ---


@pytest.fixture
async def db_session(application: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async session for repository tests."""
    async with application.state.session_factory() as session:
        yield session


# --- Payload helpers ---


def make_share_payload(**overrides: object) -> dict[str, object]:
    """Build a valid share request body."""
    payload: dict[str, object] = {
        "messages": [
            {"created": 1_700_000_000_000, "role": "user", "content": "hi"},
            {
                "created": 1_700_000_001_000,
                "role": "assistant",
                "content": [{"type": "text", "text": "hello"}],
            },
        ],
        "working_dir": "/home/dev/project",
        "description": "Debugging session",
        "base_url": "https://api.example.com",
        "total_tokens": 1234,
    }
    payload.update(overrides)
    return payload
