"""SQLAlchemy implementation of the generic Repository."""

import logging
from typing import Iterable, List, Optional, Type

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.repositories.repository import Repository, T


logger = logging.getLogger(__name__)


class SqlAlchemyRepository(Repository[T]):
    """Repository backed by an SQLAlchemy async session.

    Each call is a single delegation to the session. Storage errors are
    not caught here; they reach the caller unchanged.
    """

    def __init__(self, session: AsyncSession, entity_type: Type[T]) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session scoped to the current request
            entity_type: Mapped class this repository serves
        """
        self._session = session
        self._entity_type = entity_type

    @property
    def entity_type(self) -> Type[T]:
        """Mapped class served by this repository."""
        return self._entity_type

    async def find(self, id: int) -> Optional[T]:
        entity = await self._session.get(self._entity_type, id)

        if entity is None:
            logger.debug(f"{self._entity_type.__name__} not found: id={id}")

        return entity

    async def get_all(self) -> List[T]:
        primary_key = inspect(self._entity_type).primary_key
        result = await self._session.execute(
            select(self._entity_type).order_by(*primary_key)
        )
        return list(result.scalars().all())

    async def add(self, entity: T) -> None:
        self._session.add(entity)

    async def add_range(self, entities: Iterable[T]) -> None:
        self._session.add_all(list(entities))

    async def remove(self, entity: T) -> None:
        await self._session.delete(entity)

    async def save_changes(self) -> int:
        """Commit all staged changes.

        Returns:
            Number of entities inserted, updated or deleted
        """
        session = self._session
        written = (
            len(session.new)
            + len(session.deleted)
            + sum(1 for obj in session.dirty if session.is_modified(obj))
        )

        await session.commit()

        logger.info(f"Saved {written} {self._entity_type.__name__} change(s)")
        return written
