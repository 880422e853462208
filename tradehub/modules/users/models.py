"""Domain models for users and their wallets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradehub.db.models import User as UserModel


@dataclass(slots=True)
class Wallet:
    balance: Decimal
    topup: Decimal
    profits: Decimal


@dataclass(slots=True)
class User:
    id: str
    username: str
    wallet: Wallet
    email: Optional[str] = None
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_orm(cls, model: UserModel) -> "User":
        return cls(
            id=model.id,
            username=model.username,
            wallet=Wallet(
                balance=Decimal(model.wallet_balance or 0),
                topup=Decimal(model.wallet_topup or 0),
                profits=Decimal(model.wallet_profits or 0),
            ),
            email=model.email,
            full_name=model.full_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


@dataclass(slots=True)
class UserCreateInput:
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
