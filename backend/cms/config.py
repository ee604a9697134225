from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog CMS API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./cms.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Shared secret for the admin API (X-API-Key header).
    # Left empty, every admin request is rejected.
    admin_api_key: str = ""

    # Insert the default site settings on startup (missing keys only)
    seed_default_settings: bool = True

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_api: str = "INFO"              # cms.* application loggers

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
