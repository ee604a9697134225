"""Application service (use case) for Article operations."""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from cms.application.interfaces import ArticleRepository
from cms.application.schemas import ArticleCreate, ArticleUpdate
from cms.domain.entities import Article, ArticlePage, DEFAULT_AUTHOR
from cms.domain.excerpt import derive_excerpt
from cms.domain.exceptions import DomainValidationError, EntityNotFoundError
from cms.domain.publishing import resolve_publish_state

logger = logging.getLogger(__name__)

# Fields a partial update may overwrite. ``excerpt`` and ``published_at``
# are derived and never taken from the caller.
UPDATABLE_FIELDS = (
    "title",
    "content",
    "featured_image",
    "category",
    "author",
    "status",
    "meta_title",
    "meta_description",
)
_REQUIRED_ON_CREATE = ("slug", "title", "content")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _clean_slug(slug: str) -> str:
    """Slugs are compared without surrounding whitespace on every operation."""
    return slug.strip()


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._clock = clock

    # ── Read path ────────────────────────────────────────────────────

    async def get_published_article(self, slug: str) -> Article:
        article = await self._repository.get_published_by_slug(slug)
        if article is None:
            raise EntityNotFoundError("Article", slug)
        return article

    async def list_published_articles(
        self,
        page: int = 1,
        size: int = 10,
        category: str | None = None,
    ) -> ArticlePage:
        if page < 1 or size < 1:
            raise DomainValidationError("page and size must be positive integers")
        category = category or None

        items = await self._repository.list_published(
            category=category,
            skip=(page - 1) * size,
            limit=size,
        )
        total = await self._repository.count_published(category=category)
        return ArticlePage(
            items=items,
            page=page,
            size=size,
            total_items=total,
            category=category,
        )

    # ── Write path ───────────────────────────────────────────────────

    async def create_article(self, data: ArticleCreate) -> Article:
        missing = [name for name in _REQUIRED_ON_CREATE if _blank(getattr(data, name))]
        if missing:
            raise DomainValidationError(
                "Missing required fields: slug, title, content", fields=missing
            )

        now = self._clock()
        requested_status = None if _blank(data.status) else data.status
        state = resolve_publish_state(None, requested_status, None, now)

        article = Article(
            slug=_clean_slug(data.slug),
            title=data.title,
            content=data.content,
            excerpt=derive_excerpt(data.content),
            featured_image=data.featured_image,
            category=data.category,
            author=data.author or DEFAULT_AUTHOR,
            status=state.status,
            meta_title=data.meta_title,
            meta_description=data.meta_description,
            published_at=state.published_at,
            created_at=now,
            updated_at=now,
        )
        created = await self._repository.create(article)
        await self._repository.commit()
        logger.info("Created article '%s' (status=%s)", created.slug, created.status)
        return created

    async def update_article(self, slug: str | None, data: ArticleUpdate) -> Article:
        if _blank(slug):
            raise DomainValidationError("Missing required field: slug", fields=["slug"])
        slug = _clean_slug(slug)

        supplied = {name: getattr(data, name) for name in UPDATABLE_FIELDS if name in data.model_fields_set}
        if not supplied:
            raise DomainValidationError("No fields to update provided")
        invalid = [name for name in ("title", "content") if name in supplied and _blank(supplied[name])]
        if invalid:
            raise DomainValidationError(
                f"Fields cannot be empty: {', '.join(invalid)}", fields=invalid
            )

        existing = await self._repository.get_by_slug(slug, for_update=True)
        if existing is None:
            raise EntityNotFoundError("Article", slug)

        now = self._clock()
        requested_status = supplied.pop("status", None)
        if _blank(requested_status):
            requested_status = None
        state = resolve_publish_state(existing.status, requested_status, existing.published_at, now)

        changes: dict[str, Any] = dict(supplied)
        if requested_status is not None:
            changes["status"] = state.status
        if state.published_at != existing.published_at:
            changes["published_at"] = state.published_at
        if "content" in changes:
            changes["excerpt"] = derive_excerpt(changes["content"])
        if "author" in changes and changes["author"] is None:
            changes["author"] = DEFAULT_AUTHOR
        changes["updated_at"] = now

        affected = await self._repository.update_fields(slug, changes)
        if affected == 0:
            # Deleted between the read and the write
            raise EntityNotFoundError("Article", slug)
        await self._repository.commit()

        logger.info("Updated article '%s' (fields=%s)", slug, sorted(changes))
        return replace(existing, **changes)

    async def delete_article(self, slug: str | None) -> str:
        """Delete by slug and return the slug as stored."""
        if _blank(slug):
            raise DomainValidationError("Missing required field: slug", fields=["slug"])
        slug = _clean_slug(slug)
        deleted = await self._repository.delete_by_slug(slug)
        if not deleted:
            raise EntityNotFoundError("Article", slug)
        await self._repository.commit()
        logger.info("Deleted article '%s'", slug)
        return slug
