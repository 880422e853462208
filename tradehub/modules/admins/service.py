"""Domain services for admin management."""

from __future__ import annotations

import logging
from dataclasses import fields

from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.clock import utcnow
from tradehub.core.crypto import hash_password, verify_password
from tradehub.infrastructure.database.repositories.admin_repository import SqlAdminRepository

from .exceptions import AdminAlreadyExistsError, AdminValidationError
from .models import Admin, AdminCreateInput
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class AdminService:
    """Encapsulates admin creation and credential checks."""

    def __init__(self, repository: AdminRepository, *, bcrypt_rounds: int = 12) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def with_session(cls, session: AsyncSession, *, bcrypt_rounds: int = 12) -> "AdminService":
        return cls(SqlAdminRepository(session), bcrypt_rounds=bcrypt_rounds)

    async def get_by_id(self, admin_id: str) -> Admin | None:
        model = await self._repository.get_by_id(admin_id)
        return Admin.from_orm(model) if model else None

    async def list_admins(self) -> list[Admin]:
        return [Admin.from_orm(model) for model in await self._repository.list_admins()]

    async def has_admins(self) -> bool:
        return await self._repository.count_admins() > 0

    async def authenticate(self, username: str, password: str) -> Admin | None:
        model = await self._repository.get_by_username(username)
        if model is None or not model.is_active:
            return None
        if not verify_password(password, model.password_hash):
            return None
        return Admin.from_orm(model)

    async def create_admin(self, payload: AdminCreateInput) -> Admin:
        missing = [f.name for f in fields(payload) if not getattr(payload, f.name)]
        if missing:
            raise AdminValidationError(f"Missing {len(missing)} required fields: {', '.join(missing)}")

        if await self._repository.get_by_username(payload.username) is not None:
            raise AdminAlreadyExistsError(f"Admin already exists: {payload.username}")

        model = await self._repository.create_admin(
            username=payload.username,
            password_hash=hash_password(payload.password, rounds=self._bcrypt_rounds),
            created_by_id=payload.created_by_id,
            created_by_username=payload.created_by_username,
            last_seen_at=utcnow(),
        )
        logger.info("Admin %s created by %s", payload.username, payload.created_by_username)
        return Admin.from_orm(model)

    async def touch_last_seen(self, admin_id: str) -> None:
        await self._repository.set_last_seen(admin_id, utcnow())
