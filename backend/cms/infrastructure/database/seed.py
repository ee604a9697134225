"""Startup seeding of the site settings table."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cms.infrastructure.database.models import SiteSettingModel

logger = logging.getLogger(__name__)

DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "site.title": "WebApp Pro",
    "site.description": "A blog about running an online business",
    "site.language": "en",
    "site.url": "https://example.com",
    "posts.per_page": "10",
    "social.facebook": "https://facebook.com/username",
    "social.instagram": "https://instagram.com/username",
    "social.twitter": "https://twitter.com/username",
    "social.youtube": "https://youtube.com/username",
    "social.linkedin": "https://linkedin.com/username",
    "social.github": "https://github.com/username",
    "social.footer": "2025 &copy; All Rights Reserved",
    "seo.meta_author": "WebApp Pro Team",
    "seo.meta_keywords": "online business, blog, tutorial",
    "seo.google_analytics": "",
    "seo.google_site_verification": "",
    "seo.bing_verification": "",
    "seo.structured_data": "true",
    "contact.email": "hello@example.com",
    "contact.phone": "",
    "contact.address": "",
    "contact.business_hours": "Mon-Fri, 09:00-17:00",
}


async def seed_site_settings(
    session_factory: async_sessionmaker[AsyncSession],
    defaults: dict[str, str] | None = None,
) -> int:
    """Insert every default setting whose key is not stored yet.

    Existing values are never overwritten, so this is safe to call on every
    startup. Returns the number of inserted keys.
    """
    defaults = DEFAULT_SITE_SETTINGS if defaults is None else defaults

    async with session_factory() as session:
        result = await session.execute(select(SiteSettingModel.key))
        existing = set(result.scalars().all())
        missing = [key for key in defaults if key not in existing]
        for key in missing:
            session.add(SiteSettingModel(key=key, value=defaults[key]))
        await session.commit()

    if missing:
        logger.info("Seeded %d default site settings", len(missing))
    else:
        logger.debug("Default site settings already present")
    return len(missing)
