"""
Test settings loading from environment variables.
"""
from __future__ import annotations

import pytest

from core.settings import (
    AppSettings,
    DatabaseSettings,
    get_app_settings,
    get_database_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_database_url_comes_from_env(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/orders")
    monkeypatch.setenv("DB_ECHO_SQL", "true")

    settings = DatabaseSettings()

    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/orders"
    assert settings.echo_sql is True


def test_database_defaults(monkeypatch):
    monkeypatch.delenv("DB_DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_ECHO_SQL", raising=False)

    settings = DatabaseSettings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///./orders.db"
    assert settings.echo_sql is False


def test_app_settings_from_env(monkeypatch):
    monkeypatch.setenv("APP_ENVIRONMENT", "Production")
    monkeypatch.setenv("APP_SEED_ON_STARTUP", "0")
    monkeypatch.setenv("APP_LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.is_development is False
    assert settings.seed_on_startup is False
    assert settings.log_level == "DEBUG"


def test_getters_are_cached_until_reset(monkeypatch):
    first = get_app_settings()
    assert get_app_settings() is first

    monkeypatch.setenv("APP_TITLE", "Renamed")
    assert get_app_settings().title == first.title

    reset_settings()
    assert get_app_settings().title == "Renamed"
    assert get_database_settings() is get_database_settings()
