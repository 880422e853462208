"""Notification endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.security import get_current_admin
from tradehub.interfaces.http.deps import get_db_session, get_notification_service
from tradehub.modules.admins import Admin
from tradehub.modules.notifications import (
    NotificationCreateInput,
    NotificationService,
    NotificationValidationError,
)
from tradehub.schemas import NotificationCreate, NotificationListResponse, NotificationResponse

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    active_only: bool = False,
    target: Optional[str] = None,
    _: Admin = Depends(get_current_admin),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    notifications = await service.list_notifications(active_only=active_only, target=target)
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(item) for item in notifications]
    )


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreate,
    _: Admin = Depends(get_current_admin),
    service: NotificationService = Depends(get_notification_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        notification = await service.create_notification(NotificationCreateInput(**payload.model_dump()))
    except NotificationValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    await db.commit()
    return NotificationResponse.model_validate(notification)
