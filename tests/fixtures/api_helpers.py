from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

PASSWORD = "SecurePass123!"


async def register(client: AsyncClient, name: str, email: str) -> dict:
    """Register a user and return the response body plus auth headers"""
    response = await client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": PASSWORD},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    data["headers"] = {"Authorization": f"Bearer {data['access_token']}"}
    return data


async def create_vault(
    client: AsyncClient, headers: dict, name: str = "Trip", is_private: bool = False
) -> dict:
    response = await client.post(
        "/vaults", json={"name": name, "is_private": is_private}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


async def invite(client: AsyncClient, headers: dict, vault_id: str, email: str):
    return await client.post(
        f"/vaults/{vault_id}/invitations", json={"email": email}, headers=headers
    )


async def fetch_all(db_session: AsyncSession, model, *conditions) -> list:
    """Read rows straight from the store, bypassing stale identity-map state"""
    stmt = select(model).where(*conditions).execution_options(populate_existing=True)
    result = await db_session.exec(stmt)
    return list(result.all())
