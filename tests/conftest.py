"""Shared fixtures: a throwaway SQLite store wired into the FastAPI app."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
import sys
import tempfile

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
os.environ.setdefault("DB_DSN", "sqlite+aiosqlite:///:memory:")
os.environ["LOG_FILE"] = str(Path(tempfile.gettempdir()) / "greeting_api-tests" / "app.log")

from greeting_api.config.dependencies import get_database_session  # noqa: E402
from greeting_api.infrastructure.persistence import init_models  # noqa: E402
from greeting_api.main import app  # noqa: E402


@pytest.fixture
def session_factory(tmp_path: Path):
    """Session factory bound to a fresh SQLite file per test."""

    # NullPool: TestClient runs each request on its own event loop.
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'greetings.db'}",
        poolclass=NullPool,
    )
    asyncio.run(init_models(engine))

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory):
    async def override_get_database_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_database_session] = override_get_database_session

    yield TestClient(app)

    app.dependency_overrides.clear()
