"""Tests for the login / logout console views."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_login_page_reports_session(async_client: AsyncClient, session):
    resp = await async_client.get("/login")
    assert resp.json() == {"authenticated": False, "login_path": "/login"}
    session.set("abc")
    resp = await async_client.get("/login")
    assert resp.json()["authenticated"] is True


@pytest.mark.asyncio
async def test_login_stores_token_used_by_later_calls(async_client: AsyncClient, fake_api, session):
    resp = await async_client.post(
        "/login", json={"email": "admin@hrms.com", "password": "admin123"}
    )
    assert resp.status_code == 200
    token = resp.json()["token"]
    assert session.get() == token

    await async_client.get("/employees")
    assert fake_api.requests[-1].headers["Authorization"] == f"Bearer {token}"


@pytest.mark.asyncio
async def test_login_with_bad_credentials(async_client: AsyncClient, session):
    resp = await async_client.post(
        "/login", json={"email": "admin@hrms.com", "password": "nope"}
    )
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid email or password"
    assert session.get() is None


@pytest.mark.asyncio
async def test_logout_refresh_and_me(async_client: AsyncClient, session):
    resp = await async_client.get("/me")
    assert resp.status_code == 401

    session.set("abc")
    resp = await async_client.get("/me")
    assert resp.json()["name"] == "Admin User"

    resp = await async_client.post("/refresh")
    assert resp.json()["token"].startswith("refreshed-dummy-jwt-token-")

    resp = await async_client.post("/logout")
    assert resp.json() == {"success": True, "message": "Logged out successfully"}
    assert session.get() is None


@pytest.mark.asyncio
async def test_refresh_without_session(async_client: AsyncClient):
    resp = await async_client.post("/refresh")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "No token to refresh"
