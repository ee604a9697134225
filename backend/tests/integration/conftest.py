"""Fixtures for integration tests — an isolated app over a temporary SQLite file."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cms.config import Settings
from cms.infrastructure.database import Base
from cms.main import create_app

ADMIN_KEY = "test-admin-key"


@pytest_asyncio.fixture
async def app(tmp_path):
    settings = Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'cms-test.db'}",
        admin_api_key=ADMIN_KEY,
        app_env="test",
    )
    application = create_app(settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def session_factory(app):
    return app.state.session_factory


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def admin_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-API-Key": ADMIN_KEY},
    ) as http_client:
        yield http_client
