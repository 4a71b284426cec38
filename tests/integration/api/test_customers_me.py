import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, register):
    token, user = await register("jane@example.com", first_name="Jane")

    response = await client.get("/customers/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["valid"] is True
    assert response.json()["user"] == user


@pytest.mark.asyncio
async def test_me_without_session(client: AsyncClient):
    response = await client.get("/customers/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient, register):
    token, _ = await register("jane@example.com", first_name="Jane")
    headers = {"Authorization": f"Bearer {token}"}

    response = await client.patch(
        "/customers/me", json={"company": "Initech", "job_title": "PM"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["company"] == "Initech"
    assert response.json()["first_name"] == "Jane"

    me = await client.get("/customers/me", headers=headers)
    assert me.json()["user"]["job_title"] == "PM"


@pytest.mark.asyncio
async def test_update_profile_after_logout(client: AsyncClient, register):
    token, _ = await register("jane@example.com")
    await client.post("/customer-auth", json={"action": "logout", "token": token})

    response = await client.patch(
        "/customers/me", json={"company": "Initech"}, headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"
