from .article_repository import SQLAlchemyArticleRepository
from .site_setting_repository import SQLAlchemySiteSettingRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemySiteSettingRepository",
]
