"""Reusable FastAPI dependencies."""

from .database import get_container, get_db_session
from .services import (
    get_admin_service,
    get_investment_service,
    get_notification_service,
    get_plan_service,
    get_topup_service,
    get_user_service,
)

__all__ = [
    "get_container",
    "get_db_session",
    "get_admin_service",
    "get_investment_service",
    "get_notification_service",
    "get_plan_service",
    "get_topup_service",
    "get_user_service",
]
