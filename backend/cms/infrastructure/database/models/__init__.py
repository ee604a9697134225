from .article import ArticleModel
from .site_setting import SiteSettingModel

__all__ = [
    "ArticleModel",
    "SiteSettingModel",
]
