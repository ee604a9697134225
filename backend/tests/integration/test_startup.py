"""Tests for the application lifespan: table creation, settings seed, shutdown."""

import pytest
from httpx import ASGITransport, AsyncClient

from cms.config import Settings
from cms.infrastructure.database.models import SiteSettingModel
from cms.infrastructure.database.seed import DEFAULT_SITE_SETTINGS
from cms.main import create_app, lifespan


def _settings(tmp_path, **overrides) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'cms-startup.db'}",
        admin_api_key="startup-key",
        app_env="test",
        **overrides,
    )


@pytest.mark.asyncio
async def test_startup_creates_tables_and_seeds_settings(tmp_path):
    application = create_app(_settings(tmp_path))

    async with lifespan(application):
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            settings_response = await client.get("/api/settings")
            articles_response = await client.get("/api/articles")

    assert settings_response.status_code == 200
    assert settings_response.json()["data"] == DEFAULT_SITE_SETTINGS
    assert articles_response.status_code == 200
    assert articles_response.json()["data"] == []


@pytest.mark.asyncio
async def test_startup_skips_seed_when_disabled(tmp_path):
    application = create_app(_settings(tmp_path, seed_default_settings=False))

    async with lifespan(application):
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/settings")

    assert response.json() == {"success": True, "data": {}}


@pytest.mark.asyncio
async def test_restart_keeps_stored_settings(tmp_path):
    first = create_app(_settings(tmp_path))
    async with lifespan(first):
        async with first.state.session_factory() as session:
            setting = await session.get(SiteSettingModel, "site.title")
            setting.value = "Edited"
            await session.commit()

    second = create_app(_settings(tmp_path))
    async with lifespan(second):
        transport = ASGITransport(app=second)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            data = (await client.get("/api/settings")).json()["data"]

    assert data["site.title"] == "Edited"
    assert len(data) == len(DEFAULT_SITE_SETTINGS)
