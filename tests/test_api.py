from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from tradehub.core.clock import utcnow

from .factories import create_investment, create_plan, create_user


async def _create_user(client, auth_headers, username="alice") -> dict:
    response = await client.post("/api/admin/users", json={"username": username}, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_admin_routes_require_credentials(client):
    response = await client.get("/api/admin/users")

    assert response.status_code == 401


async def test_wrong_password_is_rejected(client):
    response = await client.get("/api/admin/me", auth=("root", "nope"))

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Basic"


async def test_current_admin(client, auth_headers):
    response = await client.get("/api/admin/me", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "root"
    assert body["last_seen_at"] is not None
    assert "password_hash" not in body


async def test_create_admin_and_duplicate(client, auth_headers):
    payload = {"username": "second", "password": "another-pass"}

    created = await client.post("/api/admin/admins", json=payload, headers=auth_headers)
    duplicate = await client.post("/api/admin/admins", json=payload, headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["created_by_username"] == "root"
    assert duplicate.status_code == 400
    listed = await client.get("/api/admin/admins", headers=auth_headers)
    assert {item["username"] for item in listed.json()} == {"root", "second"}


async def test_topup_credits_wallet(client, auth_headers):
    user = await _create_user(client, auth_headers)

    response = await client.post(
        f"/api/admin/users/{user['id']}/topups",
        json={"amount": "25.50", "description": "Bank transfer"},
        headers=auth_headers,
    )

    assert response.status_code == 201, response.text
    body = response.json()
    assert Decimal(body["user"]["wallet"]["balance"]) == Decimal("25.50")
    assert Decimal(body["user"]["wallet"]["topup"]) == Decimal("25.50")
    assert Decimal(body["user"]["wallet"]["profits"]) == Decimal("25.50")
    assert body["topup"]["description"] == "Bank transfer"

    listed = await client.get(f"/api/admin/users/{user['id']}/topups", headers=auth_headers)
    assert [Decimal(item["amount"]) for item in listed.json()["topups"]] == [Decimal("25.50")]

    fetched = await client.get(f"/api/admin/users/{user['id']}", headers=auth_headers)
    assert Decimal(fetched.json()["wallet"]["balance"]) == Decimal("25.50")


async def test_topup_failures_map_to_status_codes(client, auth_headers):
    user = await _create_user(client, auth_headers)
    url = f"/api/admin/users/{user['id']}/topups"

    zero = await client.post(url, json={"amount": 0, "description": "x"}, headers=auth_headers)
    missing = await client.post(url, json={"amount": 10}, headers=auth_headers)
    unknown = await client.post(
        "/api/admin/users/nobody/topups", json={"amount": 10, "description": "x"}, headers=auth_headers
    )

    assert zero.status_code == 422
    assert missing.status_code == 422
    assert missing.json()["detail"] == "Missing 1 required fields: description"
    assert unknown.status_code == 404

    fetched = await client.get(f"/api/admin/users/{user['id']}", headers=auth_headers)
    assert Decimal(fetched.json()["wallet"]["balance"]) == Decimal("0")


async def test_user_endpoints(client, auth_headers):
    await _create_user(client, auth_headers, "alice")

    duplicate = await client.post("/api/admin/users", json={"username": "alice"}, headers=auth_headers)
    missing = await client.get("/api/admin/users/nobody", headers=auth_headers)
    listed = await client.get("/api/admin/users", headers=auth_headers)

    assert duplicate.status_code == 400
    assert missing.status_code == 404
    assert [item["username"] for item in listed.json()["users"]] == ["alice"]


async def test_plan_endpoints(client, auth_headers):
    payload = {
        "name": "Silver",
        "min_amount": "100",
        "max_amount": "1000",
        "roi_percentage": "10",
        "duration_days": 30,
    }

    created = await client.post("/api/admin/plans", json=payload, headers=auth_headers)
    inverted = await client.post(
        "/api/admin/plans",
        json={**payload, "name": "Broken", "min_amount": "5000"},
        headers=auth_headers,
    )
    listed = await client.get("/api/admin/plans", headers=auth_headers)

    assert created.status_code == 201
    assert inverted.status_code == 422
    assert [item["name"] for item in listed.json()] == ["Silver"]


async def test_notification_endpoints(client, auth_headers):
    payload = {
        "message": "Welcome",
        "type": "info",
        "expiry_date": (utcnow() + timedelta(days=1)).isoformat(),
        "targets": ["all"],
    }

    created = await client.post("/api/admin/notifications", json=payload, headers=auth_headers)
    empty = await client.post(
        "/api/admin/notifications", json={**payload, "targets": [" "]}, headers=auth_headers
    )
    listed = await client.get(
        "/api/admin/notifications", params={"active_only": True, "target": "u-1"}, headers=auth_headers
    )

    assert created.status_code == 201
    assert empty.status_code == 422
    assert [item["message"] for item in listed.json()["notifications"]] == ["Welcome"]


async def test_expire_investments_endpoint(app, client, auth_headers):
    async with app.state.container.session_factory() as db:
        user = await create_user(db)
        plan = await create_plan(db)
        await create_investment(db, user, plan, utcnow() - timedelta(hours=1))
        await create_investment(db, user, plan, utcnow() + timedelta(days=5))
        user_id = user.id

    response = await client.post("/api/admin/investments/expire", headers=auth_headers)
    again = await client.post("/api/admin/investments/expire", headers=auth_headers)
    listed = await client.get(f"/api/admin/users/{user_id}/investments", headers=auth_headers)

    assert response.json() == {"updated": 1}
    assert again.json() == {"updated": 0}
    assert sorted(item["status"] for item in listed.json()["investments"]) == ["active", "expired"]


async def test_pagination_bounds_are_enforced(client, auth_headers):
    user = await _create_user(client, auth_headers)

    for params in ({"limit": -1}, {"limit": 0}, {"limit": 201}, {"offset": -1}):
        users = await client.get("/api/admin/users", params=params, headers=auth_headers)
        topups = await client.get(
            f"/api/admin/users/{user['id']}/topups", params=params, headers=auth_headers
        )
        assert users.status_code == 422, params
        assert topups.status_code == 422, params

    page = await client.get("/api/admin/users", params={"limit": 200, "offset": 0}, headers=auth_headers)
    assert page.status_code == 200
