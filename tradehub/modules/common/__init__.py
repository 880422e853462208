"""Shared abstractions used across domain modules."""

from .repository import AsyncRepository, UnitOfWork

__all__ = ["AsyncRepository", "UnitOfWork"]
