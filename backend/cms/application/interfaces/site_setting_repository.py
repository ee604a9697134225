from abc import ABC, abstractmethod

from cms.domain.entities import SiteSetting


class SiteSettingRepository(ABC):
    """Port for the read-only key/value settings table."""

    @abstractmethod
    async def get_all(self) -> list[SiteSetting]:
        """Return every stored setting."""
        ...
