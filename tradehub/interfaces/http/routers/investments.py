"""Investment maintenance endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.core.security import get_current_admin
from tradehub.interfaces.http.deps import get_db_session, get_investment_service
from tradehub.modules.admins import Admin
from tradehub.modules.investments import InvestmentService
from tradehub.schemas import ExpireInvestmentsResponse

router = APIRouter()


@router.post("/expire", response_model=ExpireInvestmentsResponse)
async def expire_investments(
    _: Admin = Depends(get_current_admin),
    service: InvestmentService = Depends(get_investment_service),
    db: AsyncSession = Depends(get_db_session),
) -> ExpireInvestmentsResponse:
    updated = await service.expire_due()
    await db.commit()
    return ExpireInvestmentsResponse(updated=updated)
