"""
Dashboard view: totals, top performers, department rollup, recent activity.

The employee and attendance lists are fetched concurrently; if either
call fails the whole view fails and no partial dashboard is returned.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import TypeAdapter

from hrms_console.api.v1.deps import get_attendance_api, get_employee_api
from hrms_console.clients.attendance import AttendanceApi
from hrms_console.clients.employees import EmployeeApi
from hrms_console.clients.http import fetch_all
from hrms_console.core.config import settings
from hrms_console.schemas.attendance import AttendanceRecord, DashboardView, Employee
from hrms_console.services.stats import dashboard_stats

router = APIRouter(tags=["dashboard"])

_employee_list = TypeAdapter(list[Employee])
_record_list = TypeAdapter(list[AttendanceRecord])


@router.get("/dashboard", response_model=DashboardView)
async def dashboard(
    employees_api: EmployeeApi = Depends(get_employee_api),
    attendance_api: AttendanceApi = Depends(get_attendance_api),
) -> DashboardView:
    raw_employees, raw_records = await fetch_all(
        employees_api.list_all(),
        attendance_api.list_all(),
    )
    return dashboard_stats(
        _employee_list.validate_python(raw_employees or []),
        _record_list.validate_python(raw_records or []),
        top_limit=settings.TOP_PERFORMERS_LIMIT,
        recent_limit=settings.RECENT_ACTIVITY_LIMIT,
    )
