"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms.config import Settings, get_settings
from cms.infrastructure.database import Base, build_engine, build_session_factory
from cms.infrastructure.database.seed import seed_site_settings
from cms.infrastructure.logging.log_config import setup_logging
from cms.presentation.api.errors import register_exception_handlers
from cms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed settings, dispose the engine."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    # 1. Create all database tables
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the default site settings (missing keys only)
    if settings.seed_default_settings:
        await seed_site_settings(app.state.session_factory)

    logger.info("%s %s started (env=%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    # Shutdown
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The settings object, engine and session factory are stored on
    ``app.state`` and reach routes through dependencies.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cms.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
