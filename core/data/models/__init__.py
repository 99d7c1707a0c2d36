"""Database models."""

from .base import Base
from .order_model import Order

__all__ = ["Base", "Order"]
