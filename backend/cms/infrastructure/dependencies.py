"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.services import ArticleService, SiteSettingsService
from cms.config import Settings
from cms.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemySiteSettingRepository,
)
from cms.infrastructure.database.session import get_db_session


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the application was built with."""
    return request.app.state.settings


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_site_settings_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SiteSettingsService, None]:
    """Provides a SiteSettingsService instance with its repository wired up."""
    repository = SQLAlchemySiteSettingRepository(session)
    yield SiteSettingsService(repository)
