"""
Auth views: login / logout / refresh against the local auth stub.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hrms_console.api.v1.deps import get_auth_api, get_session
from hrms_console.clients.auth import AuthApi
from hrms_console.core.config import settings
from hrms_console.core.session import SessionStore
from hrms_console.schemas.token import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RefreshResponse,
    SessionStatus,
)
from hrms_console.schemas.user import CurrentUser

router = APIRouter(tags=["auth"])


@router.get("/login", response_model=SessionStatus)
async def login_page(session: SessionStore = Depends(get_session)) -> SessionStatus:
    """Login entry point; unauthorized calls are redirected here."""
    return SessionStatus(
        authenticated=session.get() is not None,
        login_path=settings.LOGIN_PATH,
    )


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, auth: AuthApi = Depends(get_auth_api)) -> dict:
    return await auth.login(body.email, body.password)


@router.post("/logout", response_model=LogoutResponse)
async def logout(auth: AuthApi = Depends(get_auth_api)) -> dict:
    return await auth.logout()


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(auth: AuthApi = Depends(get_auth_api)) -> dict:
    return await auth.refresh()


@router.get("/me", response_model=CurrentUser)
async def read_current_user(auth: AuthApi = Depends(get_auth_api)) -> dict:
    """Return profile of the signed-in operator."""
    return await auth.get_current_user()
