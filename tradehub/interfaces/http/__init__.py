from fastapi import APIRouter

from tradehub.interfaces.http.routers import admins, investments, notifications, plans, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(admins.router, prefix="/admin", tags=["admins"])
    router.include_router(users.router, prefix="/admin/users", tags=["users"])
    router.include_router(plans.router, prefix="/admin/plans", tags=["plans"])
    router.include_router(notifications.router, prefix="/admin/notifications", tags=["notifications"])
    router.include_router(investments.router, prefix="/admin/investments", tags=["investments"])
    return router


__all__ = [
    "create_api_router",
]
