"""Service providers wired to the request's session and settings."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.container import ApplicationContainer
from tradehub.modules.admins import AdminService
from tradehub.modules.investments import InvestmentService
from tradehub.modules.notifications import NotificationService
from tradehub.modules.plans import PlanService
from tradehub.modules.topups import TopupService
from tradehub.modules.users import UserService

from .database import get_container, get_db_session


def get_admin_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> AdminService:
    return AdminService.with_session(db, bcrypt_rounds=container.settings.security.bcrypt_rounds)


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


def get_topup_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> TopupService:
    return TopupService.with_session(db, container.settings.wallet)


def get_plan_service(db: AsyncSession = Depends(get_db_session)) -> PlanService:
    return PlanService.with_session(db)


def get_notification_service(db: AsyncSession = Depends(get_db_session)) -> NotificationService:
    return NotificationService.with_session(db)


def get_investment_service(db: AsyncSession = Depends(get_db_session)) -> InvestmentService:
    return InvestmentService.with_session(db)
