"""Application DTOs."""

from .order_dto import OrderResponse

__all__ = ["OrderResponse"]
