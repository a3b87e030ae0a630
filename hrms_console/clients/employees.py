"""Employee facade: one call per ``/employees`` endpoint."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from hrms_console.clients.http import ApiClient


def employee_path(employee_id: str) -> str:
    # business keys are user data; encode them as a single path segment
    return f"/employees/{quote(employee_id, safe='')}"


class EmployeeApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def list_all(self) -> Any:
        return await self.client.get("/employees")

    async def create(self, data: dict[str, Any]) -> Any:
        return await self.client.post("/employees", data)

    async def get(self, employee_id: str) -> Any:
        return await self.client.get(employee_path(employee_id))

    async def update(self, employee_id: str, data: dict[str, Any]) -> Any:
        return await self.client.put(employee_path(employee_id), data)

    async def delete(self, employee_id: str) -> Any:
        """Delete by business key (``employee_id``), not the surrogate ``id``."""
        return await self.client.delete(employee_path(employee_id))
