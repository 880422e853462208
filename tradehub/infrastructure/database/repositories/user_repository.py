"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select, update

from tradehub.db.models import User as UserModel
from tradehub.modules.common.repository import AsyncRepository


class SqlUserRepository(AsyncRepository[UserModel]):
    """User repository backed by SQLAlchemy models."""

    async def get_by_id(self, user_id: str) -> UserModel | None:
        return await self.session.get(UserModel, user_id)

    async def get_by_username(self, username: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_users(self, limit: int, offset: int) -> Sequence[UserModel]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.username)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def create_user(
        self,
        *,
        username: str,
        email: str | None,
        full_name: str | None,
    ) -> UserModel:
        model = UserModel(
            username=username,
            email=email,
            full_name=full_name,
            wallet_balance=Decimal("0"),
            wallet_topup=Decimal("0"),
            wallet_profits=Decimal("0"),
        )
        return await self.add(model)

    async def increment_wallet(
        self,
        user_id: str,
        *,
        balance: Decimal,
        topup: Decimal,
        profits: Decimal,
    ) -> UserModel | None:
        # Increments are evaluated by the database so concurrent writers never
        # overwrite each other with stale totals.
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                wallet_balance=UserModel.wallet_balance + balance,
                wallet_topup=UserModel.wallet_topup + topup,
                wallet_profits=UserModel.wallet_profits + profits,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.session.get(UserModel, user_id, populate_existing=True)
