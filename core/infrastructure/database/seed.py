"""Startup seed data."""

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.data.models import Order

logger = logging.getLogger(__name__)


def default_orders() -> list[Order]:
    return [Order("123", Decimal("123"), "123 Test Street", "456 Test Street")]


async def seed_orders(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """
    Insert the demo orders into an empty orders table.

    Args:
        session_factory: Async session factory

    Returns:
        Number of orders written (0 when the table already has rows)
    """
    async with session_factory() as session:
        existing = await session.scalar(select(func.count()).select_from(Order))
        if existing:
            logger.info(f"Skipping seed, {existing} order(s) already present")
            return 0

        orders = default_orders()
        session.add_all(orders)
        await session.commit()

    logger.info(f"Seeded {len(orders)} order(s)")
    return len(orders)
