"""
Failure classification for calls to the remote HRMS API.

Everything here is a pure function of (status, body, error code): the
401 reaction (clearing the session, redirecting to login) is performed
by the HTTP client, not here.
"""

from __future__ import annotations

from typing import Any

import httpx

# Transport error classes (no response received)
TIMEOUT = "timeout"
NETWORK = "network"

TIMEOUT_MESSAGE = "Request timeout. Please try again."
NETWORK_MESSAGE = "Network error. Please check your connection."
GENERIC_MESSAGE = "An unexpected error occurred. Please try again."

STATUS_MESSAGES: dict[int, str] = {
    400: "Invalid request. Please check your input.",
    401: "Unauthorized. Please login again.",
    403: "Access denied. You do not have permission.",
    404: "Resource not found.",
    409: "Conflict. The resource already exists.",
    422: "Validation error. Please check your input.",
    500: "Server error. Please try again later.",
}


def classify_transport_error(exc: BaseException) -> str | None:
    """Map an httpx transport exception onto ``TIMEOUT`` / ``NETWORK``."""
    if isinstance(exc, httpx.TimeoutException):
        return TIMEOUT
    if isinstance(exc, httpx.NetworkError):
        return NETWORK
    return None


def _flatten(values: Any) -> list[str]:
    out: list[str] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            out.extend(str(v) for v in value)
        else:
            out.append(str(value))
    return out


def message_from_body(body: Any) -> str | None:
    """Extract a message from an error body, or ``None`` if it carries none.

    Precedence, first match wins: ``detail.message``, ``message``,
    ``error``, the flattened ``errors`` mapping or list, then a bare list of
    error objects / strings.
    """
    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
        if body.get("message"):
            return str(body["message"])
        if body.get("error"):
            return str(body["error"])
        errors = body.get("errors")
        if isinstance(errors, dict) and errors:
            return ", ".join(_flatten(errors.values()))
        if isinstance(errors, (list, tuple)) and errors:
            return ", ".join(_flatten(errors))
        return None

    if isinstance(body, list) and body:
        parts = []
        for item in body:
            if isinstance(item, dict) and item.get("message"):
                parts.append(str(item["message"]))
            else:
                parts.append(str(item))
        return ", ".join(parts)

    return None


def status_message(status: int, status_text: str | None = None) -> str:
    if status in STATUS_MESSAGES:
        return STATUS_MESSAGES[status]
    return f"Error {status}: {status_text or 'Unknown error'}"


def derive_user_message(
    status: int | None,
    body: Any = None,
    *,
    status_text: str | None = None,
    error_code: str | None = None,
    error_message: str | None = None,
) -> str:
    """Return the single human-readable message for a failed call."""
    from_body = message_from_body(body)
    if from_body is not None:
        return from_body

    if status is not None:
        return status_message(status, status_text)

    if error_code == TIMEOUT:
        return TIMEOUT_MESSAGE
    if error_code == NETWORK:
        return NETWORK_MESSAGE
    return error_message or GENERIC_MESSAGE
