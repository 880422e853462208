"""Application service for investment plans."""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.infrastructure.database.repositories.plan_repository import SqlPlanRepository

from .exceptions import PlanAlreadyExistsError, PlanValidationError
from .models import Plan, PlanCreateInput
from .repository import PlanRepository


@dataclass(slots=True)
class PlanService:
    repository: PlanRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "PlanService":
        return cls(SqlPlanRepository(session))

    async def create_plan(self, payload: PlanCreateInput) -> Plan:
        # Zero counts as missing: a plan without limits, ROI or duration is unusable.
        missing = [f.name for f in fields(payload) if not getattr(payload, f.name)]
        if missing:
            raise PlanValidationError(f"Missing {len(missing)} required fields: {', '.join(missing)}")

        min_amount = Decimal(str(payload.min_amount))
        max_amount = Decimal(str(payload.max_amount))
        roi_percentage = Decimal(str(payload.roi_percentage))
        if min_amount < 0 or roi_percentage < 0 or payload.duration_days < 0:
            raise PlanValidationError("Plan limits, ROI and duration must be positive")
        if min_amount > max_amount:
            raise PlanValidationError(f"Minimum {min_amount} exceeds maximum {max_amount}")

        if await self.repository.get_by_name(payload.name) is not None:
            raise PlanAlreadyExistsError(f"Plan already exists: {payload.name}")

        model = await self.repository.create(
            name=payload.name,
            min_amount=min_amount,
            max_amount=max_amount,
            roi_percentage=roi_percentage,
            duration_days=payload.duration_days,
        )
        return Plan.from_orm(model)

    async def get_plan(self, plan_id: str) -> Plan | None:
        model = await self.repository.get_by_id(plan_id)
        return Plan.from_orm(model) if model else None

    async def list_plans(self) -> list[Plan]:
        return [Plan.from_orm(model) for model in await self.repository.list_plans()]
