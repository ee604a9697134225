"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.interfaces import ArticleRepository
from cms.domain.entities import Article, STATUS_PUBLISHED
from cms.domain.exceptions import DuplicateEntityError, PersistenceError
from cms.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)

_PG_UNIQUE_VIOLATION = "23505"
_SQLITE_UNIQUE_VIOLATIONS = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint violation apart from other integrity errors.

    Uses the driver's structured error code: SQLSTATE on PostgreSQL drivers,
    ``sqlite_errorname`` on SQLite. A driver exposing neither is assumed to
    report a uniqueness violation, since required columns are validated
    before insert.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _PG_UNIQUE_VIOLATION
    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname is not None:
        return errorname in _SQLITE_UNIQUE_VIOLATIONS
    return True


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            slug=model.slug,
            title=model.title,
            excerpt=model.excerpt,
            content=model.content,
            featured_image=model.featured_image,
            category=model.category,
            author=model.author,
            status=model.status,
            meta_title=model.meta_title,
            meta_description=model.meta_description,
            published_at=_as_utc(model.published_at),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            slug=entity.slug,
            title=entity.title,
            excerpt=entity.excerpt,
            content=entity.content,
            featured_image=entity.featured_image,
            category=entity.category,
            author=entity.author,
            status=entity.status,
            meta_title=entity.meta_title,
            meta_description=entity.meta_description,
            published_at=entity.published_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _published(self, category: str | None):
        stmt = select(ArticleModel).where(ArticleModel.status == STATUS_PUBLISHED)
        if category is not None:
            stmt = stmt.where(ArticleModel.category == category)
        return stmt

    async def get_by_slug(self, slug: str, *, for_update: bool = False) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        if for_update:
            stmt = stmt.with_for_update()
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("get article", exc) from exc
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_published_by_slug(self, slug: str) -> Article | None:
        stmt = self._published(None).where(ArticleModel.slug == slug).limit(1)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("get published article", exc) from exc
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_published(
        self,
        *,
        category: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Article]:
        # Equal publish timestamps fall back to the newest insert first
        stmt = (
            self._published(category)
            .order_by(ArticleModel.published_at.desc(), ArticleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("list articles", exc) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_published(self, *, category: str | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(ArticleModel)
            .where(ArticleModel.status == STATUS_PUBLISHED)
        )
        if category is not None:
            stmt = stmt.where(ArticleModel.category == category)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("count articles", exc) from exc
        return result.scalar_one()

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if is_unique_violation(exc):
                raise DuplicateEntityError("Article", "slug", article.slug) from exc
            raise PersistenceError("create article", exc) from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise PersistenceError("create article", exc) from exc
        return self._to_entity(model)

    async def update_fields(self, slug: str, changes: dict[str, Any]) -> int:
        stmt = update(ArticleModel).where(ArticleModel.slug == slug).values(**changes)
        try:
            result = await self._session.execute(stmt)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("update article", exc) from exc
        return result.rowcount

    async def delete_by_slug(self, slug: str) -> bool:
        stmt = delete(ArticleModel).where(ArticleModel.slug == slug)
        try:
            result = await self._session.execute(stmt)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("delete article", exc) from exc
        return result.rowcount > 0

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise PersistenceError("save article", exc) from exc
