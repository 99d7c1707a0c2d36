"""FastAPI dependencies for dependency injection."""

from pathlib import Path
from typing import AsyncGenerator, Callable, Type

from dotenv import load_dotenv
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.data.models import Order
from core.data.repositories import SqlAlchemyRepository
from core.domain.repositories import Repository
from core.domain.repositories.repository import T
from core.infrastructure.database import get_session_factory


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get SQLAlchemy async session scoped to one request.

    Yields:
        AsyncSession instance, closed once the response is sent
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session


def get_repository(
    entity_type: Type[T],
) -> Callable[[AsyncSession], Repository[T]]:
    """Build a dependency providing a repository for ``entity_type``.

    Args:
        entity_type: Mapped entity class

    Returns:
        Dependency callable yielding a request-scoped repository
    """

    def _get_repository(
        session: AsyncSession = Depends(get_session),
    ) -> Repository[T]:
        return SqlAlchemyRepository(session, entity_type)

    return _get_repository


get_order_repository = get_repository(Order)
