"""Domain service for notifications shown to users."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.clock import as_utc, utcnow
from tradehub.infrastructure.database.repositories.notification_repository import SqlNotificationRepository

from .exceptions import NotificationValidationError
from .models import Notification, NotificationCreateInput
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NotificationService:
    repository: NotificationRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "NotificationService":
        return cls(SqlNotificationRepository(session))

    async def create_notification(self, payload: NotificationCreateInput) -> Notification:
        missing = [
            name
            for name in ("message", "type", "expiry_date", "targets")
            if not getattr(payload, name)
        ]
        if missing:
            raise NotificationValidationError(
                f"Missing {len(missing)} required fields: {', '.join(missing)}"
            )

        targets = [target.strip() for target in payload.targets if target and target.strip()]
        if not targets:
            raise NotificationValidationError("Notification needs at least one target")

        model = await self.repository.create(
            message=payload.message,
            type=payload.type,
            expiry_date=as_utc(payload.expiry_date),
            targets=targets,
        )
        logger.info("Notification %s created for %d target(s)", model.id, len(targets))
        return Notification.from_orm(model)

    async def list_notifications(
        self,
        *,
        active_only: bool = False,
        target: str | None = None,
        now: datetime | None = None,
    ) -> list[Notification]:
        now = as_utc(now) if now else utcnow()
        rows = await self.repository.list_notifications(expiring_after=now if active_only else None)
        notifications = [Notification.from_orm(row) for row in rows]
        if target:
            notifications = [item for item in notifications if item.addresses(target)]
        return notifications
