"""Endpoints for managing back-office admins."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.security import get_current_admin
from tradehub.interfaces.http.deps import get_admin_service, get_db_session
from tradehub.modules.admins import (
    Admin,
    AdminAlreadyExistsError,
    AdminCreateInput,
    AdminService,
    AdminValidationError,
)
from tradehub.schemas import AdminCreate, AdminResponse

router = APIRouter()


@router.get("/me", response_model=AdminResponse)
async def current_admin(admin: Admin = Depends(get_current_admin)):
    return admin


@router.get("/admins", response_model=list[AdminResponse])
async def list_admins(
    _: Admin = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service),
):
    return await service.list_admins()


@router.post("/admins", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: AdminCreate,
    admin: Admin = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        created = await service.create_admin(
            AdminCreateInput(
                username=payload.username,
                password=payload.password,
                created_by_id=admin.id,
                created_by_username=admin.username,
            )
        )
    except AdminValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except AdminAlreadyExistsError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Admin already exists") from exc

    await db.commit()
    return created
