from .article_service import ArticleService
from .site_settings_service import SiteSettingsService

__all__ = [
    "ArticleService",
    "SiteSettingsService",
]
