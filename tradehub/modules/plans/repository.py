"""Repository protocol for investment plans."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from tradehub.db.models import Plan as PlanModel


class PlanRepository(Protocol):
    async def get_by_id(self, plan_id: str) -> PlanModel | None:
        ...

    async def get_by_name(self, name: str) -> PlanModel | None:
        ...

    async def list_plans(self) -> Sequence[PlanModel]:
        ...

    async def create(
        self,
        *,
        name: str,
        min_amount: Decimal,
        max_amount: Decimal,
        roi_percentage: Decimal,
        duration_days: int,
    ) -> PlanModel:
        ...
