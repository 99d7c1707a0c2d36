"""Database engine lifecycle and seeding."""

from .lifecycle import close_database, create_engine, get_session_factory, init_database
from .seed import seed_orders

__all__ = [
    "close_database",
    "create_engine",
    "get_session_factory",
    "init_database",
    "seed_orders",
]
