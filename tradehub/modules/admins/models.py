"""Domain models for back-office admins."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tradehub.core.clock import as_utc
from tradehub.db.models import Admin as AdminModel


@dataclass(slots=True)
class Admin:
    id: str
    username: str
    is_active: bool
    created_by_id: str
    created_by_username: str
    password_hash: str = field(repr=False)
    last_seen_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, model: AdminModel) -> "Admin":
        return cls(
            id=model.id,
            username=model.username,
            is_active=bool(model.is_active),
            created_by_id=model.created_by_id,
            created_by_username=model.created_by_username,
            password_hash=model.password_hash,
            last_seen_at=as_utc(model.last_seen_at),
            created_at=as_utc(model.created_at),
        )


@dataclass(slots=True)
class AdminCreateInput:
    username: str
    password: str
    created_by_id: str
    created_by_username: str
