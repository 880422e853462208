"""Repository interface for top-up records."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from tradehub.db.models import Topup as TopupModel


class TopupRepository(Protocol):
    async def create(
        self,
        *,
        user_id: str,
        amount: Decimal,
        description: str,
    ) -> TopupModel | None:
        ...

    async def list_for_user(self, user_id: str, limit: int, offset: int) -> Sequence[TopupModel]:
        ...
