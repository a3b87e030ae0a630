"""Attendance facade: one call per ``/attendance`` endpoint."""

from __future__ import annotations

from datetime import date
from typing import Any
from urllib.parse import quote

from hrms_console.clients.http import ApiClient


def _iso(value: date | str | None) -> str | None:
    if isinstance(value, date):
        return value.isoformat()
    return value


class AttendanceApi:
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def mark(self, data: dict[str, Any]) -> Any:
        return await self.client.post("/attendance", data)

    async def list_all(
        self,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
        status: str | None = None,
    ) -> Any:
        return await self.client.get(
            "/attendance",
            params={
                "start_date": _iso(start_date),
                "end_date": _iso(end_date),
                "status_filter": status,
            },
        )

    async def list_by_employee(
        self,
        employee_id: str,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> Any:
        return await self.client.get(
            f"/attendance/{quote(employee_id, safe='')}",
            params={"start_date": _iso(start_date), "end_date": _iso(end_date)},
        )

    async def update(self, attendance_id: int, data: dict[str, Any]) -> Any:
        return await self.client.put(f"/attendance/{attendance_id}", data)

    async def delete(self, attendance_id: int) -> Any:
        return await self.client.delete(f"/attendance/{attendance_id}")
