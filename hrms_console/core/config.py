"""
Centralised console settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "HRMS Console"
    VERSION: str = "1.0.0"

    # ── Remote HRMS API ─────────────────────────────────────────────
    API_BASE_URL: str = "http://localhost:8000/api/v1"

    # ── Session ──────────────────────────────────────────────────────
    LOGIN_PATH: str = "/login"
    AUTH_TOKEN_KEY: str = "authToken"
    TOKEN_STORE_PATH: str | None = None  # None keeps the token in memory

    # ── Views ────────────────────────────────────────────────────────
    RECORDS_PER_PAGE: int = 10
    TOP_PERFORMERS_LIMIT: int = 5
    RECENT_ACTIVITY_LIMIT: int = 10
    DEPARTMENTS: Annotated[list[str], NoDecode] = [
        "Engineering",
        "Marketing",
        "Sales",
        "HR",
        "Finance",
        "Operations",
    ]

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1",
        "http://127.0.0.1:5173",
    ]

    @field_validator("CORS_ORIGINS", "DEPARTMENTS", mode="before")
    @classmethod
    def _parse_csv(cls, v: object) -> list[str]:
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()
