"""Pydantic schemas for the (stubbed) login / token exchange."""

from __future__ import annotations

from pydantic import BaseModel

from hrms_console.schemas.user import CurrentUser


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    success: bool
    token: str
    user: CurrentUser


class RefreshResponse(BaseModel):
    success: bool
    token: str


class LogoutResponse(BaseModel):
    success: bool
    message: str


class SessionStatus(BaseModel):
    authenticated: bool
    login_path: str
