"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Back-office REST API client configuration."""

    model_config = SettingsConfigDict(env_prefix="BACKOFFICE_API_")

    base_url: str = "http://localhost:5000/api"
    timeout: float = 30.0
    token: str | None = None  # bearer token for CLI use

    # 401 responses on this path do not reset the auth session
    login_path: str = "/auth/login"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ReportSettings(BaseSettings):
    """Stock report configuration."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    # Reconcile from raw inventory + history when the report endpoint fails
    fallback_enabled: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "PharmacyPOS Back Office"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    api: APISettings = Field(default_factory=APISettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
