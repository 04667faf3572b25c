import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from tests.fixtures.api_helpers import PASSWORD, register


@pytest.mark.asyncio
async def test_register_starts_trial(client: AsyncClient):
    data = await register(client, "Ana", "Ana@Example.com")

    assert data["user"]["email"] == "ana@example.com"
    assert data["user"]["subscription_status"] == "trial"
    assert data["linked_invitations"] == 0
    assert data["access_token"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient):
    await register(client, "Ana", "ana@example.com")

    response = await client.post(
        "/auth/register",
        json={"name": "Other", "email": "ANA@example.com", "password": PASSWORD},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_rejects_short_password(client: AsyncClient):
    response = await client.post(
        "/auth/register",
        json={"name": "Ana", "email": "ana@example.com", "password": "short"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_and_me(client: AsyncClient):
    await register(client, "Ana", "ana@example.com")

    login = await client.post(
        "/auth/login", json={"email": "ana@example.com", "password": PASSWORD}
    )
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = await client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert me.status_code == 200
    body = me.json()
    assert body["user"]["name"] == "Ana"
    assert body["access"]["status"] == "trial"
    assert body["access"]["can_create_vaults"] is True
    assert body["access"]["can_create_own_resources"] is True
    assert body["access"]["days_remaining"] == ApplicationConfig.TRIAL_DAYS


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient):
    await register(client, "Ana", "ana@example.com")

    response = await client.post(
        "/auth/login", json={"email": "ana@example.com", "password": "nope-nope"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_me_with_invalid_token(client: AsyncClient):
    response = await client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_with_signed_token_for_malformed_user_id(client: AsyncClient):
    token = generate_jwt("not-a-uuid")

    response = await client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
