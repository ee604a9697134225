"""Application service exposing the site settings table as a flat mapping."""

from cms.application.interfaces import SiteSettingRepository


class SiteSettingsService:
    def __init__(self, repository: SiteSettingRepository):
        self._repository = repository

    async def get_site_settings(self) -> dict[str, str | None]:
        settings = await self._repository.get_all()
        return {setting.key: setting.value for setting in settings}
