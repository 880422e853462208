"""Domain models for investment plans."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradehub.db.models import Plan as PlanModel


@dataclass(slots=True)
class Plan:
    id: str
    name: str
    min_amount: Decimal
    max_amount: Decimal
    roi_percentage: Decimal
    duration_days: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, model: PlanModel) -> "Plan":
        return cls(
            id=model.id,
            name=model.name,
            min_amount=Decimal(model.min_amount),
            max_amount=Decimal(model.max_amount),
            roi_percentage=Decimal(model.roi_percentage),
            duration_days=model.duration_days,
            created_at=model.created_at,
        )


@dataclass(slots=True)
class PlanCreateInput:
    name: str
    min_amount: Decimal
    max_amount: Decimal
    roi_percentage: Decimal
    duration_days: int
