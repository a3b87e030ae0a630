"""Pydantic schemas for Employee / Attendance DTOs and console views."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


# ── Employee ────────────────────────────────────────────────────────
class Employee(BaseModel):
    id: int | None = None
    employee_id: str
    full_name: str
    email: str
    department: str


class EmployeeForm(BaseModel):
    """Raw create-employee form input; validated by ``services.forms``."""

    employee_id: str = ""
    full_name: str = ""
    email: str = ""
    department: str = ""


class EmployeeUpdate(BaseModel):
    full_name: str | None = None
    email: str | None = None
    department: str | None = None


# ── Attendance ──────────────────────────────────────────────────────
class AttendanceRecord(BaseModel):
    id: int | None = None
    employee_id: str
    attendance_date: date
    status: AttendanceStatus
    created_at: datetime | None = None


class AttendanceForm(BaseModel):
    """Raw mark-attendance form input; validated by ``services.forms``."""

    employee_id: str = ""
    attendance_date: str = ""
    status: str = AttendanceStatus.PRESENT.value


class AttendanceUpdate(BaseModel):
    attendance_date: date | None = None
    status: AttendanceStatus | None = None


class AttendanceRow(BaseModel):
    """An attendance record joined with its employee's name."""

    id: int | None
    employee_id: str
    employee_name: str
    attendance_date: date
    status: AttendanceStatus
    created_at: datetime | None = None


# ── List views ──────────────────────────────────────────────────────
class PageInfo(BaseModel):
    current_page: int
    total_pages: int
    total_records: int
    records_per_page: int


class EmployeeListView(BaseModel):
    employees: list[Employee]
    page: PageInfo
    empty_message: str | None = None


class AttendanceListView(BaseModel):
    records: list[AttendanceRow]
    page: PageInfo
    employee_id: str | None = None
    empty_message: str | None = None


# ── Dashboard ──────────────────────────────────────────────────────
class Totals(BaseModel):
    total_employees: int
    total_records: int
    present_days: int
    absent_days: int


class TopPerformer(BaseModel):
    employee_id: str
    employee_name: str
    department: str
    present_days: int


class DepartmentStat(BaseModel):
    total: int
    present_days: int


class DashboardView(BaseModel):
    totals: Totals
    top_performers: list[TopPerformer]
    department_stats: dict[str, DepartmentStat]
    recent_activity: list[AttendanceRow]


# ── Generic ────────────────────────────────────────────────────────
class MutationResponse(BaseModel):
    success: bool = True
    message: str
    data: Any = None


class FieldErrors(BaseModel):
    detail: str
    errors: dict[str, str] = Field(default_factory=dict)
    success: bool = False
