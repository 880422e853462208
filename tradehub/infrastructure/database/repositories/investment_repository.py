"""SQLAlchemy implementation for investment repository"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, select, update

from tradehub.db.models import Investment
from tradehub.modules.common.repository import AsyncRepository


class SqlInvestmentRepository(AsyncRepository[Investment]):
    async def create(
        self,
        *,
        user_id: str,
        plan_id: str,
        amount: Decimal,
        expiry_date: datetime,
    ) -> Investment:
        investment = Investment(
            user_id=user_id,
            plan_id=plan_id,
            amount=amount,
            status="active",
            expiry_date=expiry_date,
        )
        return await self.add(investment)

    async def list_for_user(self, user_id: str) -> Sequence[Investment]:
        stmt = (
            select(Investment)
            .where(Investment.user_id == user_id)
            .order_by(desc(Investment.created_at), Investment.expiry_date)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def expire_due(self, now: datetime) -> int:
        stmt = (
            update(Investment)
            .where(Investment.status == "active", Investment.expiry_date <= now)
            .values(status="expired")
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
