"""Repository implementations."""

from .sqlalchemy_repository import SqlAlchemyRepository

__all__ = ["SqlAlchemyRepository"]
