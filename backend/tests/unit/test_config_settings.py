"""Unit tests for application settings configuration."""

from pathlib import Path

from cms.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_admin_api_key_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("ADMIN_API_KEY", "from-env")
    monkeypatch.setenv("SEED_DEFAULT_SETTINGS", "false")

    settings = Settings(_env_file=None)

    assert settings.admin_api_key == "from-env"
    assert settings.seed_default_settings is False


def test_admin_api_key_defaults_to_empty(monkeypatch):
    monkeypatch.delenv("ADMIN_API_KEY", raising=False)
    assert Settings(_env_file=None).admin_api_key == ""
