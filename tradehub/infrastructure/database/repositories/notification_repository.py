"""SQLAlchemy implementation for notification repository"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select

from tradehub.db.models import Notification
from tradehub.modules.common.repository import AsyncRepository


class SqlNotificationRepository(AsyncRepository[Notification]):
    async def create(
        self,
        *,
        message: str,
        type: str,
        expiry_date: datetime,
        targets: list[str],
    ) -> Notification:
        notification = Notification(
            message=message,
            type=type,
            expiry_date=expiry_date,
            targets=targets,
        )
        return await self.add(notification)

    async def list_notifications(self, *, expiring_after: datetime | None = None) -> Sequence[Notification]:
        stmt = select(Notification)
        if expiring_after is not None:
            stmt = stmt.where(Notification.expiry_date > expiring_after)
        stmt = stmt.order_by(desc(Notification.created_at), Notification.expiry_date)
        result = await self.session.execute(stmt)
        return result.scalars().all()
