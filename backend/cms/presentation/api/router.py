"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from cms.presentation.api.endpoints.admin_articles import router as admin_articles_router
from cms.presentation.api.endpoints.articles import router as articles_router
from cms.presentation.api.endpoints.health import router as health_router
from cms.presentation.api.endpoints.site_settings import router as site_settings_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(admin_articles_router)
router.include_router(site_settings_router)
