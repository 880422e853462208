"""Domain services for user management."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.infrastructure.database.repositories.user_repository import SqlUserRepository

from .exceptions import UserAlreadyExistsError
from .models import User, UserCreateInput
from .repository import UserRepository


class UserService:
    """Encapsulates user lookup and registration use cases."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session))

    async def get_user(self, user_id: str) -> User | None:
        model = await self._repository.get_by_id(user_id)
        return User.from_orm(model) if model else None

    async def list_users(self, limit: int = 50, offset: int = 0) -> list[User]:
        rows = await self._repository.list_users(limit, offset)
        return [User.from_orm(row) for row in rows]

    async def create_user(self, payload: UserCreateInput) -> User:
        if await self._repository.get_by_username(payload.username) is not None:
            raise UserAlreadyExistsError(f"Username already registered: {payload.username}")
        if payload.email and await self._repository.get_by_email(payload.email) is not None:
            raise UserAlreadyExistsError(f"Email already registered: {payload.email}")

        model = await self._repository.create_user(
            username=payload.username,
            email=payload.email,
            full_name=payload.full_name,
        )
        return User.from_orm(model)
