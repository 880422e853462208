"""Admin authentication for the back-office API."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.interfaces.http.deps import get_admin_service, get_db_session
from tradehub.modules.admins import Admin, AdminService

security = HTTPBasic()


async def get_current_admin(
    credentials: HTTPBasicCredentials = Depends(security),
    service: AdminService = Depends(get_admin_service),
    db: AsyncSession = Depends(get_db_session),
) -> Admin:
    admin = await service.authenticate(credentials.username, credentials.password)
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    await service.touch_last_seen(admin.id)
    await db.commit()
    return admin
