"""Investment plan endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.security import get_current_admin
from tradehub.interfaces.http.deps import get_db_session, get_plan_service
from tradehub.modules.admins import Admin
from tradehub.modules.plans import (
    PlanAlreadyExistsError,
    PlanCreateInput,
    PlanService,
    PlanValidationError,
)
from tradehub.schemas import PlanCreate, PlanResponse

router = APIRouter()


@router.get("", response_model=list[PlanResponse])
async def list_plans(
    _: Admin = Depends(get_current_admin),
    service: PlanService = Depends(get_plan_service),
):
    return [PlanResponse.model_validate(plan) for plan in await service.list_plans()]


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
async def create_plan(
    payload: PlanCreate,
    _: Admin = Depends(get_current_admin),
    service: PlanService = Depends(get_plan_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        plan = await service.create_plan(PlanCreateInput(**payload.model_dump()))
    except PlanValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except PlanAlreadyExistsError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await db.commit()
    return PlanResponse.model_validate(plan)
