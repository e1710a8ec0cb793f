"""Tests for settings and logging configuration."""

from src.config import configure_logging, get_logger, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.api.base_url == "http://localhost:5000/api"
        assert settings.api.login_path == "/auth/login"
        assert settings.api.token is None
        assert settings.report.fallback_enabled is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BACKOFFICE_API_BASE_URL", "https://pos.example.com/api/")
        monkeypatch.setenv("BACKOFFICE_API_TIMEOUT", "5")
        monkeypatch.setenv("BACKOFFICE_API_TOKEN", "secret")
        reset_settings()

        settings = get_settings()
        assert settings.api.base_url == "https://pos.example.com/api"
        assert settings.api.timeout == 5.0
        assert settings.api.token == "secret"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_configure_and_log(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        reset_settings()
        configure_logging()
        get_logger("test").info("logging_configured", check=True)
