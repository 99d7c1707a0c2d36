"""Data layer - infrastructure persistence."""

from .models import Base, Order
from .repositories import SqlAlchemyRepository

__all__ = [
    "Base",
    "Order",
    "SqlAlchemyRepository",
]
