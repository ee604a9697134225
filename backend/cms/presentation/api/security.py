"""Shared-secret authentication for the admin API."""

import logging
import secrets

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from cms.config import Settings
from cms.domain.exceptions import AuthenticationError
from cms.infrastructure.dependencies import get_app_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=False)


def require_admin_api_key(
    api_key: str | None = Security(API_KEY_HEADER),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Reject the request unless ``X-API-Key`` matches the configured secret.

    An unconfigured secret rejects every request rather than opening the
    admin API.
    """
    configured_key = settings.admin_api_key
    if not configured_key:
        logger.warning("Admin request rejected: ADMIN_API_KEY is not configured")
        raise AuthenticationError()

    # Constant-time comparison
    if not api_key or not secrets.compare_digest(api_key, configured_key):
        raise AuthenticationError()
