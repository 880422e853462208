from __future__ import annotations

import base64

import httpx
import pytest

from tradehub.core.config import DatabaseSettings, SecuritySettings, Settings
from tradehub.core.container import ApplicationContainer
from tradehub.main import create_app
from tradehub.modules.admins import AdminCreateInput, AdminService

ADMIN_USERNAME = "root"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'tradehub.db'}"),
        security=SecuritySettings(bcrypt_rounds=4),
    )


@pytest.fixture
async def container(settings):
    container = ApplicationContainer.from_settings(settings)
    await container.init_db()
    yield container
    await container.dispose()


@pytest.fixture
async def session(container):
    async with container.session_factory() as session:
        yield session


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    container: ApplicationContainer = app.state.container
    await container.init_db()
    async with container.session_factory() as db:
        service = AdminService.with_session(db, bcrypt_rounds=settings.security.bcrypt_rounds)
        await service.create_admin(
            AdminCreateInput(
                username=ADMIN_USERNAME,
                password=ADMIN_PASSWORD,
                created_by_id="system",
                created_by_username="system",
            )
        )
        await db.commit()
    yield app
    await container.dispose()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = base64.b64encode(f"{ADMIN_USERNAME}:{ADMIN_PASSWORD}".encode()).decode()
    return {"Authorization": f"Basic {token}"}
