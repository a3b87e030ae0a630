"""
FastAPI dependencies: session, HTTP client and per-resource facades.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from hrms_console.clients.attendance import AttendanceApi
from hrms_console.clients.auth import AuthApi
from hrms_console.clients.employees import EmployeeApi
from hrms_console.clients.http import ApiClient
from hrms_console.core.config import settings
from hrms_console.core.session import SessionStore


class LoginRedirect:
    """Navigation half of the 401 reaction, realised by the error handler."""

    def __init__(self, login_path: str) -> None:
        self.login_path = login_path
        self.location: str | None = None

    def __call__(self) -> None:
        self.location = self.login_path


def get_session(request: Request) -> SessionStore:
    return request.app.state.session


def get_http(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


def get_api_client(
    request: Request,
    session: SessionStore = Depends(get_session),
    http: httpx.AsyncClient = Depends(get_http),
) -> ApiClient:
    redirect = LoginRedirect(settings.LOGIN_PATH)
    request.state.login_redirect = redirect
    return ApiClient(http, session, on_unauthorized=redirect)


def get_employee_api(client: ApiClient = Depends(get_api_client)) -> EmployeeApi:
    return EmployeeApi(client)


def get_attendance_api(client: ApiClient = Depends(get_api_client)) -> AttendanceApi:
    return AttendanceApi(client)


def get_auth_api(session: SessionStore = Depends(get_session)) -> AuthApi:
    return AuthApi(session)
