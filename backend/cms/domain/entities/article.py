"""Domain entities — pure Python business objects, no framework dependencies."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

STATUS_DRAFT = "draft"
STATUS_PUBLISHED = "published"
DEFAULT_AUTHOR = "Admin"


@dataclass
class Article:
    """Core domain entity representing a blog article."""

    slug: str
    title: str
    content: str
    excerpt: str | None = None
    featured_image: str | None = None
    category: str | None = None
    author: str = DEFAULT_AUTHOR
    status: str = STATUS_DRAFT
    meta_title: str | None = None
    meta_description: str | None = None
    id: int | None = None
    published_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_published(self) -> bool:
        return self.status == STATUS_PUBLISHED


@dataclass
class ArticlePage:
    """One page of published articles plus the pagination metadata."""

    items: list[Article]
    page: int
    size: int
    total_items: int
    category: str | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size) if self.size else 0
