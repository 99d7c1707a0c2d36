from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    HTTP application settings.

    Loaded from environment variables or .env file with the APP_ prefix,
    e.g. APP_ENVIRONMENT=production disables the interactive docs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APP_",
        extra="ignore",
    )

    environment: str = "development"
    title: str = "Orders Data Access API"
    version: str = "1.0.0"
    log_level: str = "INFO"
    seed_on_startup: bool = True

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the application."""
    return AppSettings()
