"""Domain models for wallet top-ups."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradehub.modules.users.models import User


class TopupFailure(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


@dataclass(slots=True)
class TopupRecord:
    id: str
    user_id: str
    amount: Decimal
    description: str
    created_at: Optional[datetime]


@dataclass(slots=True, frozen=True)
class TopupResult:
    """Outcome of a top-up. Falsy when the top-up did not go through."""

    user: Optional[User] = None
    topup: Optional[TopupRecord] = None
    failure: Optional[TopupFailure] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def succeeded(cls, user: User, topup: TopupRecord) -> "TopupResult":
        return cls(user=user, topup=topup)

    @classmethod
    def failed(cls, failure: TopupFailure, detail: str) -> "TopupResult":
        return cls(failure=failure, detail=detail)
