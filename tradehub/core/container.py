"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tradehub.core.config import Settings, get_settings
from tradehub.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    create_all,
)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ApplicationContainer":
        settings = settings or get_settings()
        engine = build_engine(settings)
        return cls(settings=settings, engine=engine, session_factory=build_session_factory(engine))

    async def init_db(self) -> None:
        await create_all(self.engine)

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = ["ApplicationContainer"]
