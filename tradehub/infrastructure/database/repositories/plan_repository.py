"""SQLAlchemy implementation for plan repository"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select

from tradehub.db.models import Plan
from tradehub.modules.common.repository import AsyncRepository


class SqlPlanRepository(AsyncRepository[Plan]):
    async def get_by_id(self, plan_id: str) -> Plan | None:
        return await self.session.get(Plan, plan_id)

    async def get_by_name(self, name: str) -> Plan | None:
        result = await self.session.execute(select(Plan).where(Plan.name == name))
        return result.scalar_one_or_none()

    async def list_plans(self) -> Sequence[Plan]:
        result = await self.session.execute(select(Plan).order_by(Plan.min_amount, Plan.name))
        return result.scalars().all()

    async def create(
        self,
        *,
        name: str,
        min_amount: Decimal,
        max_amount: Decimal,
        roi_percentage: Decimal,
        duration_days: int,
    ) -> Plan:
        plan = Plan(
            name=name,
            min_amount=min_amount,
            max_amount=max_amount,
            roi_percentage=roi_percentage,
            duration_days=duration_days,
        )
        return await self.add(plan)
