"""Repository protocol for notifications."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from tradehub.db.models import Notification as NotificationModel


class NotificationRepository(Protocol):
    async def create(
        self,
        *,
        message: str,
        type: str,
        expiry_date: datetime,
        targets: list[str],
    ) -> NotificationModel:
        ...

    async def list_notifications(self, *, expiring_after: datetime | None = None) -> Sequence[NotificationModel]:
        ...
