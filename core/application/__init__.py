"""Application layer - response DTOs."""

from .dtos import OrderResponse

__all__ = ["OrderResponse"]
