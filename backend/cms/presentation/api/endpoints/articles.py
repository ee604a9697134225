"""Public article endpoints — published articles only."""

from fastapi import APIRouter, Depends, Query

from cms.application.schemas import (
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleResponse,
    PaginationResponse,
)
from cms.application.services import ArticleService
from cms.infrastructure.dependencies import get_article_service

MAX_PAGE_SIZE = 100

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    category: str | None = Query(None, description="Exact category filter"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Retrieve a page of published articles, newest first."""
    result = await service.list_published_articles(page=page, size=size, category=category)
    return ArticleListResponse(
        data=[ArticleResponse.model_validate(a, from_attributes=True) for a in result.items],
        pagination=PaginationResponse(
            page=result.page,
            size=result.size,
            total_items=result.total_items,
            total_pages=result.total_pages,
            category=result.category,
        ),
    )


@router.get("/{slug}", response_model=ArticleDetailResponse)
async def get_article(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleDetailResponse:
    """Retrieve a single published article by slug."""
    article = await service.get_published_article(slug)
    return ArticleDetailResponse(data=ArticleResponse.model_validate(article, from_attributes=True))
