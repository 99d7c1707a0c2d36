"""Domain layer - storage-agnostic interfaces."""

from .repositories import Repository

__all__ = ["Repository"]
