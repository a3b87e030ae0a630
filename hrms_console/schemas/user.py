"""Pydantic schema for the signed-in console operator."""

from __future__ import annotations

from pydantic import BaseModel


class CurrentUser(BaseModel):
    id: str
    email: str
    name: str
    role: str
