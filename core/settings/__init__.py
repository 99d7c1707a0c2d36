# Settings package
from core.settings.modules import (
    AppSettings,
    DatabaseSettings,
    get_app_settings,
    get_database_settings,
)


def reset_settings() -> None:
    """Drop cached settings so the next getter call re-reads the environment."""
    get_app_settings.cache_clear()
    get_database_settings.cache_clear()


__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "get_app_settings",
    "get_database_settings",
    "reset_settings",
]
