"""SQLAlchemy implementation for top-up repository"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, select

from tradehub.db.models import Topup
from tradehub.modules.common.repository import AsyncRepository


class SqlTopupRepository(AsyncRepository[Topup]):
    async def create(
        self,
        *,
        user_id: str,
        amount: Decimal,
        description: str,
    ) -> Topup:
        record = Topup(
            user_id=user_id,
            amount=amount,
            description=description,
        )
        return await self.add(record)

    async def list_for_user(self, user_id: str, limit: int, offset: int) -> Sequence[Topup]:
        stmt = (
            select(Topup)
            .where(Topup.user_id == user_id)
            .order_by(desc(Topup.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
