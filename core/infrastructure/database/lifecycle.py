"""Database Lifecycle Management - Async Version"""

import logging
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from core.data.models import Base
from core.settings import get_database_settings

logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    SQLite connections may be used from other threads, and an in-memory
    database lives only as long as its single connection.

    Args:
        database_url: SQLAlchemy async URL
        echo: Echo SQL statements

    Returns:
        Configured async engine
    """
    url = make_url(database_url)
    options = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True

    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")
    return create_async_engine(url, **options)


async def init_database() -> None:
    """Initialize async engine, session factory and tables."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    settings = get_database_settings()
    _async_engine = create_engine(settings.database_url, echo=settings.echo_sql)

    _async_session_factory = async_sessionmaker(
        bind=_async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    # Create tables
    async with _async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections...")
        await _async_engine.dispose()

    _async_engine = None
    _async_session_factory = None
