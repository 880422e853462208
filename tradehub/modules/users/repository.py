"""Repository protocol for users."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from tradehub.db.models import User as UserModel


class UserRepository(Protocol):
    async def get_by_id(self, user_id: str) -> UserModel | None:
        ...

    async def get_by_username(self, username: str) -> UserModel | None:
        ...

    async def get_by_email(self, email: str) -> UserModel | None:
        ...

    async def list_users(self, limit: int, offset: int) -> Sequence[UserModel]:
        ...

    async def create_user(
        self,
        *,
        username: str,
        email: str | None,
        full_name: str | None,
    ) -> UserModel:
        ...

    async def increment_wallet(
        self,
        user_id: str,
        *,
        balance: Decimal,
        topup: Decimal,
        profits: Decimal,
    ) -> UserModel | None:
        """Add the deltas to the stored totals in one statement and return the updated row."""
        ...
