"""Repository abstractions shared by the domain modules."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class UnitOfWork(Protocol):
    """Transaction boundary a service commits or rolls back. ``AsyncSession`` satisfies it."""

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
