"""Tests for health check endpoints."""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from mtgconverter.api.dependencies import get_workspace
from mtgconverter.db.storage import DatabaseStorage
from mtgconverter.main import app
from mtgconverter.models.db import Base
from mtgconverter.services.session_store import SessionStore
from mtgconverter.services.workspace import ConverterWorkspace


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


def _workspace(engine) -> ConverterWorkspace:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return ConverterWorkspace(SessionStore(DatabaseStorage(session_factory), key="health-test"))


@asynccontextmanager
async def _client_for(workspace: ConverterWorkspace):
    app.dependency_overrides[get_workspace] = lambda: workspace

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def client(async_engine):
    """Provide an async test client whose workspace stores sessions in SQLite."""
    async with _client_for(_workspace(async_engine)) as client:
        yield client


@pytest.fixture
async def broken_client(async_engine):
    """Provide a client whose session storage table has been dropped."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    async with _client_for(_workspace(async_engine)) as client:
        yield client


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    async def test_health_no_storage_check(self, broken_client: AsyncClient) -> None:
        """Liveness does not depend on session storage."""
        response = await broken_client.get("/health")

        assert response.status_code == 200
        assert response.json()["storage"] is None


class TestReadyEndpoint:
    async def test_ready_with_storage(self, client: AsyncClient) -> None:
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "storage": "connected"}

    async def test_ready_when_storage_broken(self, broken_client: AsyncClient) -> None:
        """Readiness reports 503 when the session table cannot be read."""
        response = await broken_client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not ready", "storage": "disconnected"}
