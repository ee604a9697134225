"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Request bodies accept both snake_case names and their camelCase aliases.
_REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Required fields are checked by the service so that a missing slug,
    title or content is reported as a 400 with a single message.
    """

    model_config = _REQUEST_CONFIG

    slug: str | None = Field(None, examples=["getting-started"])
    title: str | None = Field(None, examples=["Getting Started"])
    content: str | None = Field(None, examples=["# Welcome\nThis is the first post."])
    featured_image: str | None = None
    category: str | None = Field(None, examples=["technology"])
    author: str | None = None
    status: str | None = Field(None, examples=["draft", "published"])
    meta_title: str | None = None
    meta_description: str | None = None


class ArticleUpdate(BaseModel):
    """Schema for a partial update — only the keys sent are applied.

    ``slug`` identifies the target and is never changed. Unknown keys are
    ignored and do not count as an update.
    """

    model_config = _REQUEST_CONFIG

    slug: str | None = None
    title: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category: str | None = None
    author: str | None = None
    status: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None


class ArticleDelete(BaseModel):
    """Body of the admin delete request."""

    slug: str | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    slug: str
    title: str
    excerpt: str | None
    content: str
    featured_image: str | None
    category: str | None
    author: str
    status: str
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None
    meta_title: str | None
    meta_description: str | None

    model_config = {"from_attributes": True}


class PaginationResponse(BaseModel):
    page: int
    size: int
    total_items: int
    total_pages: int
    category: str | None


class ArticleListResponse(BaseModel):
    success: bool = True
    data: list[ArticleResponse]
    pagination: PaginationResponse


class ArticleDetailResponse(BaseModel):
    success: bool = True
    data: ArticleResponse


class ArticleMutationResponse(BaseModel):
    """Acknowledgement returned by the admin endpoints."""

    success: bool = True
    message: str
    slug: str
