"""Admin article endpoints — create, partial update, delete.

Every route requires the ``X-API-Key`` header. FastAPI decodes the JSON body
before dependencies run, so a malformed body is answered with 400 whether or
not a key is sent. A well-formed body without a valid key gets 401 before
field validation or any service call.
"""

from fastapi import APIRouter, Depends, status

from cms.application.schemas import (
    ArticleCreate,
    ArticleDelete,
    ArticleMutationResponse,
    ArticleUpdate,
)
from cms.application.services import ArticleService
from cms.infrastructure.dependencies import get_article_service
from cms.presentation.api.security import require_admin_api_key

router = APIRouter(
    prefix="/admin/articles",
    tags=["Admin"],
    dependencies=[Depends(require_admin_api_key)],
)


@router.post("", response_model=ArticleMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleMutationResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleMutationResponse(message="Article added successfully", slug=article.slug)


@router.put("", response_model=ArticleMutationResponse)
async def update_article(
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleMutationResponse:
    """Partially update the article identified by ``slug`` in the body."""
    article = await service.update_article(data.slug, data)
    return ArticleMutationResponse(message="Article updated successfully", slug=article.slug)


@router.delete("", response_model=ArticleMutationResponse)
async def delete_article(
    data: ArticleDelete,
    service: ArticleService = Depends(get_article_service),
) -> ArticleMutationResponse:
    """Delete the article identified by ``slug`` in the body."""
    slug = await service.delete_article(data.slug)
    return ArticleMutationResponse(message="Article deleted successfully", slug=slug)
