"""
Auth facade: LOCAL STUB, not a real credential exchange.

Exactly one hard-coded credential pair is accepted and the token is a
synthesized string.  Nothing here talks to the remote API, so a failed
login never triggers the client's 401 reaction.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from hrms_console.core.errors import derive_user_message
from hrms_console.core.exceptions import ApiError
from hrms_console.core.session import SessionStore

logger = logging.getLogger(__name__)

DEMO_EMAIL = "admin@hrms.com"
DEMO_PASSWORD = "admin123"

DEMO_USER = {
    "id": "1",
    "email": DEMO_EMAIL,
    "name": "Admin User",
    "role": "admin",
}


def _now_ms() -> int:
    return int(time.time() * 1000)


def _unauthorized(error: str, message: str, code: str) -> ApiError:
    body = {"detail": {"error": error, "message": message, "code": code}}
    return ApiError(
        derive_user_message(401, body),
        status_code=401,
        body=body,
        code=code,
    )


class AuthApi:
    def __init__(self, session: SessionStore) -> None:
        self.session = session

    async def login(self, email: str, password: str) -> dict[str, Any]:
        if email == DEMO_EMAIL and password == DEMO_PASSWORD:
            token = f"dummy-jwt-token-{_now_ms()}"
            self.session.set(token)
            logger.info("Login succeeded for %s", email)
            return {"success": True, "token": token, "user": dict(DEMO_USER)}

        logger.info("Login rejected for %s", email)
        raise _unauthorized(
            "Invalid credentials", "Invalid email or password", "INVALID_CREDENTIALS"
        )

    async def logout(self) -> dict[str, Any]:
        self.session.clear()
        return {"success": True, "message": "Logged out successfully"}

    async def refresh(self) -> dict[str, Any]:
        if not self.session.get():
            raise _unauthorized("Unauthorized", "No token to refresh", "NO_TOKEN")
        token = f"refreshed-dummy-jwt-token-{_now_ms()}"
        self.session.set(token)
        return {"success": True, "token": token}

    async def get_current_user(self) -> dict[str, Any]:
        if self.session.get():
            return dict(DEMO_USER)
        raise _unauthorized("Unauthorized", "Invalid or expired token", "INVALID_TOKEN")
