from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub import __version__
from tradehub.core.config import Settings, get_settings
from tradehub.core.container import ApplicationContainer
from tradehub.core.logging import configure_logging
from tradehub.interfaces.http import create_api_router
from tradehub.interfaces.http.deps import get_db_session
from tradehub.schemas import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    if container.settings.database.auto_create:
        await container.init_db()
    yield
    await container.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Province Trade Hub back office: users, wallets, top-ups and plans",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse)
    async def health_check(db: AsyncSession = Depends(get_db_session)) -> HealthResponse:
        try:
            await db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            return HealthResponse(status="error", details=str(exc))
        return HealthResponse(status="ok")

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "tradehub.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
