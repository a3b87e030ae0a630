"""
Normalized error values and the console's global exception handlers.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed call to the remote API, carrying its normalized message."""

    def __init__(
        self,
        user_message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
        code: str | None = None,
        status_text: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.status_code = status_code
        self.body = body
        self.code = code
        self.status_text = status_text

    def __str__(self) -> str:
        return self.user_message


class FormValidationError(Exception):
    """Client-side form errors, keyed by field. Never sent to the server."""

    def __init__(
        self,
        errors: dict[str, str],
        message: str = "Please correct the highlighted fields",
        status_code: int = 422,
    ) -> None:
        super().__init__(message)
        self.errors = errors
        self.message = message
        self.status_code = status_code


async def _api_error_handler(request: Request, exc: ApiError):
    redirect = getattr(request.state, "login_redirect", None)
    if redirect is not None and redirect.location:
        return RedirectResponse(redirect.location, status_code=303)

    return JSONResponse(
        status_code=exc.status_code or 502,
        content={
            "detail": exc.user_message,
            "success": False,
            "retry": request.url.path,
        },
    )


async def _form_error_handler(_request: Request, exc: FormValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "errors": exc.errors, "success": False},
    )


async def _generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "success": False},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(FormValidationError, _form_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
