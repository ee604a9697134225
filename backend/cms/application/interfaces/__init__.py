from .article_repository import ArticleRepository
from .site_setting_repository import SiteSettingRepository

__all__ = [
    "ArticleRepository",
    "SiteSettingRepository",
]
