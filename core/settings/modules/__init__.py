# Settings modules
from .app_settings import AppSettings, get_app_settings
from .database_settings import DatabaseSettings, get_database_settings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "DatabaseSettings",
    "get_database_settings",
]
