"""Domain service for investment lifecycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.clock import as_utc, utcnow
from tradehub.infrastructure.database.repositories.investment_repository import SqlInvestmentRepository

from .models import Investment
from .repository import InvestmentRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InvestmentService:
    repository: InvestmentRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "InvestmentService":
        return cls(SqlInvestmentRepository(session))

    async def list_for_user(self, user_id: str) -> list[Investment]:
        rows = await self.repository.list_for_user(user_id)
        return [Investment.from_orm(row) for row in rows]

    async def expire_due(self, now: datetime | None = None) -> int:
        updated = await self.repository.expire_due(as_utc(now) if now else utcnow())
        logger.info("Updated %d investments to expired.", updated)
        return updated
