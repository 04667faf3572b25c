import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from tests.fixtures.api_helpers import register

ADMIN_HEADERS = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.mark.asyncio
async def test_deactivate_subscription_restricts_user(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")

    response = await client.put(
        f"/admin/users/{ana['user']['id']}/subscription",
        json={"status": "inactive"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["access"]["is_restricted"] is True

    me = await client.get("/me", headers=ana["headers"])
    assert me.json()["access"]["status"] == "inactive"
    assert me.json()["access"]["can_accept_invitations"] is True


@pytest.mark.asyncio
async def test_expired_trial_date_reads_as_inactive(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")

    response = await client.put(
        f"/admin/users/{ana['user']['id']}/subscription",
        json={"status": "trial", "trial_expires_at": "2020-01-01T00:00:00Z"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["subscription_status"] == "trial"
    assert response.json()["access"]["status"] == "inactive"


@pytest.mark.asyncio
async def test_requires_admin_key(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")

    missing = await client.put(
        f"/admin/users/{ana['user']['id']}/subscription", json={"status": "active"}
    )
    wrong = await client.put(
        f"/admin/users/{ana['user']['id']}/subscription",
        json={"status": "active"},
        headers={"X-Admin-API-Key": "wrong"},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_unknown_user(client: AsyncClient):
    response = await client.put(
        "/admin/users/00000000-0000-0000-0000-000000000000/subscription",
        json={"status": "active"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 404
