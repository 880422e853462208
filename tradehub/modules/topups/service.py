"""Top-up domain service.

A top-up appends an immutable record and credits the owner's wallet. Both
writes share one transaction and the wallet totals are incremented in the
database, so a failed wallet update never leaves an orphan record and two
concurrent top-ups for the same user both land.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.config import WalletSettings
from tradehub.db.models import Topup as TopupModel
from tradehub.infrastructure.database.repositories.topup_repository import SqlTopupRepository
from tradehub.infrastructure.database.repositories.user_repository import SqlUserRepository
from tradehub.modules.common import UnitOfWork
from tradehub.modules.users.models import User
from tradehub.modules.users.repository import UserRepository

from .exceptions import NotFoundError, PersistenceError, TopupError, ValidationError
from .models import TopupFailure, TopupRecord, TopupResult
from .repository import TopupRepository

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(slots=True)
class TopupService:
    topups: TopupRepository
    users: UserRepository
    unit_of_work: UnitOfWork
    credit_profits: bool = True
    max_amount: Optional[Decimal] = None

    @classmethod
    def with_session(cls, session: AsyncSession, wallet: WalletSettings | None = None) -> "TopupService":
        wallet = wallet or WalletSettings()
        return cls(
            topups=SqlTopupRepository(session),
            users=SqlUserRepository(session),
            unit_of_work=session,
            credit_profits=wallet.credit_profits_on_topup,
            max_amount=wallet.max_topup_amount,
        )

    async def apply_topup(self, amount: Any, description: Any, user_id: Any) -> TopupResult:
        """Record a top-up of ``amount`` for ``user_id`` and credit the wallet.

        Never raises for domain or store failures; the returned result carries
        the failure kind and a human readable detail instead.
        """
        try:
            return await self._apply(amount, description, user_id)
        except TopupError as exc:
            if exc.failure is TopupFailure.PERSISTENCE:
                logger.exception("Error creating topup for user %s: %s", user_id, exc)
            else:
                logger.warning("Topup rejected for user %s: %s", user_id, exc)
            return TopupResult.failed(exc.failure, str(exc))

    async def list_topups(self, user_id: str, limit: int = 50, offset: int = 0) -> list[TopupRecord]:
        rows = await self.topups.list_for_user(user_id, limit, offset)
        return [self._to_domain(row) for row in rows]

    async def _apply(self, amount: Any, description: Any, user_id: Any) -> TopupResult:
        missing = [
            name
            for name, value in (("amount", amount), ("description", description), ("user_id", user_id))
            if _is_missing(value)
        ]
        if missing:
            raise ValidationError(f"Missing {len(missing)} required fields: {', '.join(missing)}")
        value = self._parse_amount(amount)

        try:
            if await self.users.get_by_id(user_id) is None:
                raise NotFoundError(f"User not found: {user_id}")

            record = await self.topups.create(user_id=user_id, amount=value, description=str(description))
            if record is None:
                raise PersistenceError("Topup was not saved.")

            updated = await self.users.increment_wallet(
                user_id,
                balance=value,
                topup=value,
                profits=value if self.credit_profits else ZERO,
            )
            if updated is None:
                raise PersistenceError(f"Wallet update for user {user_id} returned no row")

            await self.unit_of_work.commit()
        except PersistenceError:
            await self._rollback()
            raise
        except SQLAlchemyError as exc:
            await self._rollback()
            raise PersistenceError(str(exc)) from exc

        logger.info("Topup %s credited %s to user %s", record.id, value, user_id)
        return TopupResult.succeeded(User.from_orm(updated), self._to_domain(record))

    def _parse_amount(self, amount: Any) -> Decimal:
        if isinstance(amount, bool):
            raise ValidationError(f"Amount is not a number: {amount!r}")
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Amount is not a number: {amount!r}") from exc

        if not value.is_finite():
            raise ValidationError(f"Amount is not a number: {amount!r}")
        if value <= ZERO:
            raise ValidationError("Amount must be greater than zero")
        if self.max_amount is not None and value > self.max_amount:
            raise ValidationError(f"Amount exceeds the maximum of {self.max_amount}")
        try:
            quantized = value.quantize(CENT)
        except InvalidOperation as exc:
            raise ValidationError("Amount is out of range") from exc
        if value != quantized:
            raise ValidationError("Amount must not have more than two decimal places")
        return quantized

    async def _rollback(self) -> None:
        try:
            await self.unit_of_work.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback after failed topup did not complete")

    @staticmethod
    def _to_domain(model: TopupModel) -> TopupRecord:
        return TopupRecord(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            description=model.description,
            created_at=model.created_at,
        )
