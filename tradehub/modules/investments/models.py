"""Domain models for user investments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradehub.core.clock import as_utc
from tradehub.db.models import Investment as InvestmentModel

STATUS_ACTIVE = "active"
STATUS_EXPIRED = "expired"


@dataclass(slots=True)
class Investment:
    id: str
    user_id: str
    plan_id: str
    amount: Decimal
    status: str
    expiry_date: datetime
    created_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, model: InvestmentModel) -> "Investment":
        return cls(
            id=model.id,
            user_id=model.user_id,
            plan_id=model.plan_id,
            amount=Decimal(model.amount),
            status=model.status,
            expiry_date=as_utc(model.expiry_date),
            created_at=as_utc(model.created_at),
        )
