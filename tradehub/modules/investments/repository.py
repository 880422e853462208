"""Repository protocol for investments."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence

from tradehub.db.models import Investment as InvestmentModel


class InvestmentRepository(Protocol):
    async def create(
        self,
        *,
        user_id: str,
        plan_id: str,
        amount: Decimal,
        expiry_date: datetime,
    ) -> InvestmentModel:
        ...

    async def list_for_user(self, user_id: str) -> Sequence[InvestmentModel]:
        ...

    async def expire_due(self, now: datetime) -> int:
        """Flip every active investment whose expiry date has passed; return how many changed."""
        ...
