"""
HTTP client core: the single chokepoint for calls to the remote HRMS API.

Attaches the bearer token (read from the session on every call), returns
parsed bodies unchanged on success and raises ``ApiError`` with a
normalized message on failure.  No automatic retries: the caller decides
whether to re-invoke.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from hrms_console.core.errors import classify_transport_error, derive_user_message
from hrms_console.core.exceptions import ApiError
from hrms_console.core.session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def create_http_client(
    base_url: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the shared ``httpx.AsyncClient`` (transport-default timeout)."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers=DEFAULT_HEADERS,
        transport=transport,
    )


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


async def fetch_all(*calls: Awaitable[Any]) -> list[Any]:
    """Await every call concurrently, then raise the first failure.

    No call is left running once this returns.
    """
    results = await asyncio.gather(*calls, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


class ApiClient:
    """Thin wrapper over an ``httpx.AsyncClient`` bound to a session.

    ``on_unauthorized`` is the navigation half of the 401 reaction; it is
    called once, after the session has been cleared.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        session: SessionStore,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> None:
        self.http = http
        self.session = session
        self.on_unauthorized = on_unauthorized

    def _auth_headers(self) -> dict[str, str]:
        token = self.session.get()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self.http.request(
                method,
                path,
                params=params or None,
                json=json,
                headers=self._auth_headers(),
            )
        except httpx.HTTPError as exc:
            code = classify_transport_error(exc)
            message = derive_user_message(
                None, error_code=code, error_message=str(exc) or None
            )
            logger.warning("%s %s failed without response: %s", method, path, message)
            raise ApiError(message, code=code) from exc

        if response.is_success:
            return _parse_body(response)

        raise self._handle_failure(method, path, response)

    def _handle_failure(self, method: str, path: str, response: httpx.Response) -> ApiError:
        body = _parse_body(response)
        status = response.status_code
        message = derive_user_message(
            status, body, status_text=response.reason_phrase
        )
        code = None
        if isinstance(body, dict) and isinstance(body.get("detail"), dict):
            code = body["detail"].get("code")

        logger.warning("%s %s -> %d: %s", method, path, status, message)

        if status == 401:
            self.session.clear()
            logger.info("Session cleared after 401; redirecting to login")
            if self.on_unauthorized is not None:
                self.on_unauthorized()

        return ApiError(
            message,
            status_code=status,
            body=body,
            code=code,
            status_text=response.reason_phrase,
        )

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
