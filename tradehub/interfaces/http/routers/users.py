"""User, wallet and top-up endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.security import get_current_admin
from tradehub.interfaces.http.deps import (
    get_db_session,
    get_investment_service,
    get_topup_service,
    get_user_service,
)
from tradehub.modules.admins import Admin
from tradehub.modules.investments import InvestmentService
from tradehub.modules.topups import TopupFailure, TopupService
from tradehub.modules.users import UserAlreadyExistsError, UserCreateInput, UserService
from tradehub.schemas import (
    InvestmentListResponse,
    InvestmentResponse,
    TopupListResponse,
    TopupRequest,
    TopupResponse,
    TopupResultResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
)

router = APIRouter()

_FAILURE_STATUS = {
    TopupFailure.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TopupFailure.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    TopupFailure.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.get("", response_model=UserListResponse)
async def list_users(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    _: Admin = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    users = await service.list_users(limit, offset)
    return UserListResponse(users=[UserResponse.model_validate(user) for user in users])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    _: Admin = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        user = await service.create_user(
            UserCreateInput(username=payload.username, email=payload.email, full_name=payload.full_name)
        )
    except UserAlreadyExistsError as exc:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await db.commit()
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    _: Admin = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
):
    user = await service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.post("/{user_id}/topups", response_model=TopupResultResponse, status_code=status.HTTP_201_CREATED)
async def create_topup(
    user_id: str,
    payload: TopupRequest,
    _: Admin = Depends(get_current_admin),
    service: TopupService = Depends(get_topup_service),
) -> TopupResultResponse:
    result = await service.apply_topup(payload.amount, payload.description, user_id)
    if not result:
        raise HTTPException(status_code=_FAILURE_STATUS[result.failure], detail=result.detail)
    return TopupResultResponse(
        user=UserResponse.model_validate(result.user),
        topup=TopupResponse.model_validate(result.topup),
    )


@router.get("/{user_id}/topups", response_model=TopupListResponse)
async def list_topups(
    user_id: str,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    _: Admin = Depends(get_current_admin),
    service: TopupService = Depends(get_topup_service),
) -> TopupListResponse:
    records = await service.list_topups(user_id, limit, offset)
    return TopupListResponse(topups=[TopupResponse.model_validate(record) for record in records])


@router.get("/{user_id}/investments", response_model=InvestmentListResponse)
async def list_investments(
    user_id: str,
    _: Admin = Depends(get_current_admin),
    service: InvestmentService = Depends(get_investment_service),
) -> InvestmentListResponse:
    investments = await service.list_for_user(user_id)
    return InvestmentListResponse(
        investments=[InvestmentResponse.model_validate(item) for item in investments]
    )
