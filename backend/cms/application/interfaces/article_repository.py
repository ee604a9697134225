"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from cms.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_slug(self, slug: str, *, for_update: bool = False) -> Article | None:
        """Retrieve an article by slug regardless of status.

        With ``for_update`` the row is locked until the surrounding
        transaction ends (where the engine supports row locks).
        """
        ...

    @abstractmethod
    async def get_published_by_slug(self, slug: str) -> Article | None:
        """Retrieve a published article by slug."""
        ...

    @abstractmethod
    async def list_published(
        self,
        *,
        category: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Article]:
        """Published articles, newest ``published_at`` first."""
        ...

    @abstractmethod
    async def count_published(self, *, category: str | None = None) -> int:
        """Number of published articles matching the filter."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID.

        Raises DuplicateEntityError when the slug is already taken.
        """
        ...

    @abstractmethod
    async def update_fields(self, slug: str, changes: dict[str, Any]) -> int:
        """Apply column changes to the article with ``slug``.

        Returns the number of rows affected (0 when the slug does not exist).
        """
        ...

    @abstractmethod
    async def delete_by_slug(self, slug: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable.

        Raises PersistenceError when the store refuses the commit; nothing
        from the failed transaction is kept.
        """
        ...
