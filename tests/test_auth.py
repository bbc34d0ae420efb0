"""Tests for authentication and token handling"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models.user import User, UserStatus, RoleName
from app.api.auth import create_refresh_token


async def _login(client: AsyncClient, username: str, password: str = "testpass123"):
    return await client.post("/auth/login", data={"username": username, "password": password})


@pytest.mark.asyncio
async def test_login_with_username_or_email(client: AsyncClient, test_manager_user):
    """Test that login accepts either identifier"""
    response = await _login(client, "manager")
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["refresh_token"]

    response = await _login(client, "manager@tropicana.com")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_records_last_login(test_db, client: AsyncClient, test_manager_user):
    """Test that login stamps last_login_at and stores the refresh token"""
    response = await _login(client, "manager")
    assert response.status_code == 200

    result = await test_db.execute(select(User).where(User.id == test_manager_user.id))
    user = result.scalar_one()
    assert user.last_login_at is not None
    assert user.refresh_token == response.json()["refresh_token"]


@pytest.mark.asyncio
async def test_login_rejects_bad_password(client: AsyncClient, test_manager_user):
    """Test that a wrong password gives 401"""
    response = await _login(client, "manager", "wrong-password")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_rejects_inactive_accounts(client: AsyncClient, user_factory, roles, test_business_unit):
    """Test that only ACTIVE accounts can log in"""
    await user_factory(
        "pending",
        [(test_business_unit, roles[RoleName.FRONT_DESK])],
        status=UserStatus.PENDING_ACTIVATION,
    )

    response = await _login(client, "pending")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_returns_assignments(manager_client: AsyncClient, test_business_unit):
    """Test that /auth/me carries unit and role, never the hash"""
    response = await manager_client.get("/auth/me")
    assert response.status_code == 200

    data = response.json()
    assert data["username"] == "manager"
    assert "hashed_password" not in data
    assert len(data["assignments"]) == 1

    assignment = data["assignments"][0]
    assert assignment["business_unit_id"] == str(test_business_unit.id)
    assert assignment["business_unit"]["display_name"] == "Anchor Hotel by Tropicana"
    assert assignment["role"]["name"] == RoleName.HOTEL_MANAGER


@pytest.mark.asyncio
async def test_missing_or_invalid_token(client: AsyncClient):
    """Test that protected routes need a valid bearer token"""
    response = await client.get("/auth/me")
    assert response.status_code == 401

    response = await client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_token_cannot_access_api(client: AsyncClient, test_manager_user):
    """Test that a refresh token is rejected as an access token"""
    token = create_refresh_token(test_manager_user)
    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_rotates_tokens(client: AsyncClient, test_manager_user):
    """Test refresh rotation and reuse detection"""
    login = await _login(client, "manager")
    old_refresh = login.json()["refresh_token"]

    response = await client.post("/auth/refresh", json={"refresh_token": old_refresh})
    assert response.status_code == 200
    new_refresh = response.json()["refresh_token"]
    assert new_refresh != old_refresh

    # The rotated token is no longer valid
    response = await client.post("/auth/refresh", json={"refresh_token": old_refresh})
    assert response.status_code == 401

    response = await client.post("/auth/refresh", json={"refresh_token": new_refresh})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(client: AsyncClient, test_manager_user):
    """Test that an access token cannot be used to refresh"""
    login = await _login(client, "manager")
    response = await client.post("/auth/refresh", json={"refresh_token": login.json()["access_token"]})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_invalidates_refresh_token(client: AsyncClient, test_manager_user):
    """Test that logout clears the stored refresh token"""
    login = await _login(client, "manager")
    tokens = login.json()

    response = await client.post(
        "/auth/logout",
        headers={"Authorization": f"Bearer {tokens['access_token']}"},
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Successfully logged out"

    response = await client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_inactive_user_token_rejected(test_db, client: AsyncClient, test_manager_user, auth_headers):
    """Test that deactivated users lose API access"""
    headers = auth_headers(test_manager_user)
    test_manager_user.status = UserStatus.INACTIVE
    await test_db.commit()

    response = await client.get("/auth/me", headers=headers)
    assert response.status_code == 401
