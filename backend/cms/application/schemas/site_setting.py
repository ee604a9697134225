from pydantic import BaseModel


class SiteSettingsResponse(BaseModel):
    """Flat ``{key: value}`` view of the settings table."""

    success: bool = True
    data: dict[str, str | None]
