"""SQLAlchemy implementation of the admin repository."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import func, select, update

from tradehub.db.models import Admin as AdminModel
from tradehub.modules.common.repository import AsyncRepository


class SqlAdminRepository(AsyncRepository[AdminModel]):
    async def get_by_id(self, admin_id: str) -> AdminModel | None:
        return await self.session.get(AdminModel, admin_id)

    async def get_by_username(self, username: str) -> AdminModel | None:
        stmt = select(AdminModel).where(AdminModel.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_admins(self) -> Sequence[AdminModel]:
        stmt = select(AdminModel).order_by(AdminModel.created_at.desc(), AdminModel.username)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count_admins(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(AdminModel))
        return result.scalar_one()

    async def create_admin(
        self,
        *,
        username: str,
        password_hash: str,
        created_by_id: str,
        created_by_username: str,
        last_seen_at: datetime,
    ) -> AdminModel:
        model = AdminModel(
            username=username,
            password_hash=password_hash,
            is_active=True,
            created_by_id=created_by_id,
            created_by_username=created_by_username,
            last_seen_at=last_seen_at,
        )
        return await self.add(model)

    async def set_last_seen(self, admin_id: str, timestamp: datetime) -> None:
        stmt = (
            update(AdminModel)
            .where(AdminModel.id == admin_id)
            .values(last_seen_at=timestamp)
        )
        await self.session.execute(stmt)
