from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tradehub.core.clock import utcnow
from tradehub.modules.notifications import (
    NotificationCreateInput,
    NotificationService,
    NotificationValidationError,
)
from tradehub.modules.plans import (
    PlanAlreadyExistsError,
    PlanCreateInput,
    PlanService,
    PlanValidationError,
)


def _plan(name: str = "Gold", min_amount="500", max_amount="5000", roi="15", days=60) -> PlanCreateInput:
    return PlanCreateInput(
        name=name,
        min_amount=Decimal(min_amount),
        max_amount=Decimal(max_amount),
        roi_percentage=Decimal(roi),
        duration_days=days,
    )


async def test_create_plan(session):
    service = PlanService.with_session(session)

    plan = await service.create_plan(_plan())
    await session.commit()

    assert plan.name == "Gold"
    assert plan.min_amount == Decimal("500")
    assert plan.roi_percentage == Decimal("15")
    assert (await service.get_plan(plan.id)).duration_days == 60
    assert [item.name for item in await service.list_plans()] == ["Gold"]


async def test_plan_limits_must_be_ordered(session):
    with pytest.raises(PlanValidationError, match="exceeds"):
        await PlanService.with_session(session).create_plan(_plan(min_amount="900", max_amount="100"))


async def test_plan_with_zero_duration_is_incomplete(session):
    with pytest.raises(PlanValidationError, match="Missing 1 required fields: duration_days"):
        await PlanService.with_session(session).create_plan(_plan(days=0))


async def test_plan_names_are_unique(session):
    service = PlanService.with_session(session)
    await service.create_plan(_plan())
    await session.commit()

    with pytest.raises(PlanAlreadyExistsError):
        await service.create_plan(_plan())


def _notification(targets, expiry_date=None) -> NotificationCreateInput:
    return NotificationCreateInput(
        message="Maintenance tonight",
        type="info",
        expiry_date=expiry_date or utcnow() + timedelta(days=1),
        targets=targets,
    )


async def test_notification_targets_are_cleaned(session):
    service = NotificationService.with_session(session)

    notification = await service.create_notification(_notification([" user-1 ", "", "user-2"]))
    await session.commit()

    assert notification.targets == ["user-1", "user-2"]
    assert notification.expiry_date.tzinfo is not None


async def test_notification_needs_a_target(session):
    with pytest.raises(NotificationValidationError, match="at least one target"):
        await NotificationService.with_session(session).create_notification(_notification(["  "]))
    with pytest.raises(NotificationValidationError, match="Missing 1 required fields: targets"):
        await NotificationService.with_session(session).create_notification(_notification([]))


async def test_list_filters_by_activity_and_target(session):
    service = NotificationService.with_session(session)
    now = datetime(2030, 1, 1, tzinfo=timezone.utc)
    await service.create_notification(_notification(["all"], expiry_date=now + timedelta(hours=1)))
    await service.create_notification(_notification(["user-1"], expiry_date=now + timedelta(hours=1)))
    await service.create_notification(_notification(["user-2"], expiry_date=now - timedelta(hours=1)))
    await session.commit()

    assert len(await service.list_notifications()) == 3
    assert len(await service.list_notifications(active_only=True, now=now)) == 2

    for_user_1 = await service.list_notifications(active_only=True, target="user-1", now=now)
    assert sorted(item.targets[0] for item in for_user_1) == ["all", "user-1"]

    for_user_2 = await service.list_notifications(active_only=True, target="user-2", now=now)
    assert [item.targets for item in for_user_2] == [["all"]]
