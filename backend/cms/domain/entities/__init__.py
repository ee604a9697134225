from .article import Article, ArticlePage, DEFAULT_AUTHOR, STATUS_DRAFT, STATUS_PUBLISHED
from .site_setting import SiteSetting

__all__ = [
    "Article",
    "ArticlePage",
    "DEFAULT_AUTHOR",
    "STATUS_DRAFT",
    "STATUS_PUBLISHED",
    "SiteSetting",
]
