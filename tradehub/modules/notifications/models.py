"""Domain models for back-office notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tradehub.core.clock import as_utc
from tradehub.db.models import Notification as NotificationModel

BROADCAST_TARGET = "all"


@dataclass(slots=True)
class Notification:
    id: str
    message: str
    type: str
    expiry_date: datetime
    targets: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def addresses(self, target: str) -> bool:
        return BROADCAST_TARGET in self.targets or target in self.targets

    @classmethod
    def from_orm(cls, model: NotificationModel) -> "Notification":
        return cls(
            id=model.id,
            message=model.message,
            type=model.type,
            expiry_date=as_utc(model.expiry_date),
            targets=list(model.targets or []),
            created_at=as_utc(model.created_at),
        )


@dataclass(slots=True)
class NotificationCreateInput:
    message: str
    type: str
    expiry_date: datetime
    targets: list[str]
