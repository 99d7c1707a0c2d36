"""Generic repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD repository bound to a single entity type.

    Every read returns materialized objects; no query object crosses
    this boundary. Writes are staged until ``save_changes`` is awaited.
    """

    @abstractmethod
    async def find(self, id: int) -> Optional[T]:
        """Retrieve an entity by primary key.

        Args:
            id: Primary key value

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Return every entity of the bound type, ordered by primary key."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> None:
        """Stage a new entity for insertion."""
        pass

    @abstractmethod
    async def add_range(self, entities: Iterable[T]) -> None:
        """Stage a batch of new entities for insertion."""
        pass

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Stage deletion of a tracked entity."""
        pass

    @abstractmethod
    async def save_changes(self) -> int:
        """Commit staged changes.

        Returns:
            Number of entities written
        """
        pass
