from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.

    Loaded from environment variables or .env file:
        database_url -> DB_DATABASE_URL
        echo_sql     -> DB_ECHO_SQL
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )

    # Single connection string; selects the storage backend
    database_url: str = "sqlite+aiosqlite:///./orders.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False


@lru_cache()
def get_database_settings() -> DatabaseSettings:
    return DatabaseSettings()
