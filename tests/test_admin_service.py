from __future__ import annotations

from datetime import timedelta

import pytest

from tradehub.core.clock import utcnow
from tradehub.core.crypto import hash_password, verify_password
from tradehub.modules.admins import (
    AdminAlreadyExistsError,
    AdminCreateInput,
    AdminService,
    AdminValidationError,
)


def _payload(username: str = "ops", password: str = "hunter22") -> AdminCreateInput:
    return AdminCreateInput(
        username=username,
        password=password,
        created_by_id="system",
        created_by_username="system",
    )


@pytest.fixture
def service(session) -> AdminService:
    return AdminService.with_session(session, bcrypt_rounds=4)


def test_password_hash_round_trip():
    hashed = hash_password("hunter22", rounds=4)

    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)
    assert not verify_password("hunter22", "not-a-bcrypt-hash")


async def test_create_and_authenticate(service, session):
    assert not await service.has_admins()

    admin = await service.create_admin(_payload())
    await session.commit()

    assert admin.username == "ops"
    assert admin.is_active
    assert admin.created_by_username == "system"
    assert admin.password_hash != "hunter22"
    assert "password_hash" not in repr(admin)
    assert await service.has_admins()

    authenticated = await service.authenticate("ops", "hunter22")
    assert authenticated is not None
    assert authenticated.id == admin.id


async def test_authenticate_rejects_bad_credentials(service, session):
    await service.create_admin(_payload())
    await session.commit()

    assert await service.authenticate("ops", "wrong") is None
    assert await service.authenticate("nobody", "hunter22") is None


async def test_duplicate_username_is_rejected(service, session):
    await service.create_admin(_payload())
    await session.commit()

    with pytest.raises(AdminAlreadyExistsError):
        await service.create_admin(_payload(password="another1"))


async def test_missing_fields_are_rejected(service):
    with pytest.raises(AdminValidationError, match="Missing 2 required fields: username, password"):
        await service.create_admin(_payload(username="", password=""))


async def test_touch_last_seen_moves_timestamp(service, session):
    admin = await service.create_admin(_payload())
    await session.commit()
    before = utcnow()

    await service.touch_last_seen(admin.id)
    await session.commit()
    session.expire_all()

    refreshed = await service.get_by_id(admin.id)
    assert refreshed.last_seen_at >= before - timedelta(seconds=1)
    assert [item.username for item in await service.list_admins()] == ["ops"]
