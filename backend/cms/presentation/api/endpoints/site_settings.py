"""Site settings endpoint — read-only key/value configuration."""

from fastapi import APIRouter, Depends

from cms.application.schemas import SiteSettingsResponse
from cms.application.services import SiteSettingsService
from cms.infrastructure.dependencies import get_site_settings_service

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=SiteSettingsResponse)
async def get_site_settings(
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> SiteSettingsResponse:
    """Return all site settings as a flat ``{key: value}`` object."""
    return SiteSettingsResponse(data=await service.get_site_settings())
