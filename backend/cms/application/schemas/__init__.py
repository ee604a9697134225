from .article import (
    ArticleCreate,
    ArticleDelete,
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleMutationResponse,
    ArticleResponse,
    ArticleUpdate,
    PaginationResponse,
)
from .site_setting import SiteSettingsResponse

__all__ = [
    "ArticleCreate",
    "ArticleDelete",
    "ArticleDetailResponse",
    "ArticleListResponse",
    "ArticleMutationResponse",
    "ArticleResponse",
    "ArticleUpdate",
    "PaginationResponse",
    "SiteSettingsResponse",
]
