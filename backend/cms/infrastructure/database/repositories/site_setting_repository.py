"""Concrete repository for the key/value settings table."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.interfaces import SiteSettingRepository
from cms.domain.entities import SiteSetting
from cms.domain.exceptions import PersistenceError
from cms.infrastructure.database.models import SiteSettingModel


class SQLAlchemySiteSettingRepository(SiteSettingRepository):
    """Implements the SiteSettingRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_all(self) -> list[SiteSetting]:
        stmt = select(SiteSettingModel).order_by(SiteSettingModel.key)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("read settings", exc) from exc
        return [SiteSetting(key=row.key, value=row.value) for row in result.scalars().all()]
