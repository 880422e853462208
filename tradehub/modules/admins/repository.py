"""Repository protocol for admins."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from tradehub.db.models import Admin as AdminModel


class AdminRepository(Protocol):
    async def get_by_id(self, admin_id: str) -> AdminModel | None:
        ...

    async def get_by_username(self, username: str) -> AdminModel | None:
        ...

    async def list_admins(self) -> Sequence[AdminModel]:
        ...

    async def count_admins(self) -> int:
        ...

    async def create_admin(
        self,
        *,
        username: str,
        password_hash: str,
        created_by_id: str,
        created_by_username: str,
        last_seen_at: datetime,
    ) -> AdminModel:
        ...

    async def set_last_seen(self, admin_id: str, timestamp: datetime) -> None:
        ...
