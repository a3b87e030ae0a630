"""
HRMS Console: application entry point.

This is the **only** file that assembles the app.  All remote calls go
through `clients/`; statistics and form handling live in `services/`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hrms_console.api.v1.api import api_router
from hrms_console.clients.http import create_http_client
from hrms_console.core.config import settings
from hrms_console.core.exceptions import register_exception_handlers
from hrms_console.core.session import build_session_store

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    application.state.session = build_session_store(
        settings.TOKEN_STORE_PATH, key=settings.AUTH_TOKEN_KEY
    )
    application.state.http = create_http_client(settings.API_BASE_URL)
    logger.warning(
        "Authentication is a local stub: only the demo credential pair is accepted"
    )
    logger.info("HRMS Console v%s started against %s", settings.VERSION, settings.API_BASE_URL)
    yield
    await application.state.http.aclose()
    logger.info("Shutdown complete")


# ── App factory ─────────────────────────────────────────────────────
def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="Administrative console for employees and attendance",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Normalized API errors, form errors, no stack-trace leakage
    register_exception_handlers(application)

    application.include_router(api_router)
    return application


app = create_app()
