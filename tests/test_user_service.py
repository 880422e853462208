from __future__ import annotations

from decimal import Decimal

import pytest

from tradehub.modules.users import UserAlreadyExistsError, UserCreateInput, UserService


async def test_new_user_starts_with_empty_wallet(session):
    service = UserService.with_session(session)

    user = await service.create_user(UserCreateInput(username="bob", email="bob@example.com"))
    await session.commit()

    assert user.wallet.balance == Decimal("0")
    assert user.wallet.topup == Decimal("0")
    assert user.wallet.profits == Decimal("0")
    assert (await service.get_user(user.id)).username == "bob"
    assert await service.get_user("missing") is None


async def test_duplicate_username_or_email_is_rejected(session):
    service = UserService.with_session(session)
    await service.create_user(UserCreateInput(username="bob", email="bob@example.com"))
    await session.commit()

    with pytest.raises(UserAlreadyExistsError, match="Username"):
        await service.create_user(UserCreateInput(username="bob"))
    with pytest.raises(UserAlreadyExistsError, match="Email"):
        await service.create_user(UserCreateInput(username="robert", email="bob@example.com"))


async def test_list_users_pages(session):
    service = UserService.with_session(session)
    for name in ("ann", "ben", "cat"):
        await service.create_user(UserCreateInput(username=name))
    await session.commit()

    everyone = await service.list_users()
    page = await service.list_users(limit=2, offset=0)

    assert {user.username for user in everyone} == {"ann", "ben", "cat"}
    assert len(page) == 2
    assert len(await service.list_users(limit=2, offset=2)) == 1
