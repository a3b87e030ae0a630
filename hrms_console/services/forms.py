"""
Client-side validation for the create-employee and mark-attendance forms,
plus routing of server failures back onto form fields.

Validation errors are collected for every field at once and raised as a
``FormValidationError``; nothing invalid is ever sent to the server.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, timezone

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from hrms_console.core.exceptions import ApiError, FormValidationError
from hrms_console.schemas.attendance import (
    AttendanceForm,
    AttendanceStatus,
    EmployeeForm,
)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DUPLICATE_ATTENDANCE_MESSAGE = "Attendance for this employee on this date already exists."


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


# ── Employee ────────────────────────────────────────────────────────
class NewEmployee(BaseModel):
    employee_id: str
    full_name: str
    email: str
    department: str

    @field_validator("employee_id")
    @classmethod
    def _employee_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Employee ID is required")
        return v

    @field_validator("full_name")
    @classmethod
    def _full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Full name is required")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Email is required")
        if not _EMAIL_RE.match(v):
            raise ValueError("Please enter a valid email")
        return v

    @field_validator("department")
    @classmethod
    def _department(cls, v: str, info: ValidationInfo) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Department is required")
        allowed = (info.context or {}).get("departments")
        if allowed and v not in allowed:
            raise ValueError("Please select a valid department")
        return v


# ── Attendance ──────────────────────────────────────────────────────
class NewAttendance(BaseModel):
    employee_id: str
    attendance_date: date
    status: AttendanceStatus

    @field_validator("employee_id")
    @classmethod
    def _employee_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please select an employee")
        return v

    @field_validator("attendance_date", mode="before")
    @classmethod
    def _date(cls, v: object) -> date:
        if isinstance(v, date):
            parsed = v
        else:
            text = str(v or "").strip()
            if not text:
                raise ValueError("Date is required")
            try:
                parsed = date.fromisoformat(text)
            except ValueError:
                raise ValueError("Please enter a valid date") from None
        if parsed > _utc_today():
            raise ValueError("Attendance cannot be marked for a future date")
        return parsed

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v: object) -> AttendanceStatus:
        text = str(v or "").strip().upper()
        if not text:
            raise ValueError("Status is required")
        try:
            return AttendanceStatus(text)
        except ValueError:
            raise ValueError("Status must be PRESENT or ABSENT") from None


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "submit"
        ctx_error = (err.get("ctx") or {}).get("error")
        errors.setdefault(field, str(ctx_error) if ctx_error else err["msg"])
    return errors


def validate_employee_form(
    form: EmployeeForm, departments: Iterable[str] | None = None
) -> NewEmployee:
    try:
        return NewEmployee.model_validate(
            form.model_dump(),
            context={"departments": list(departments) if departments else None},
        )
    except ValidationError as exc:
        raise FormValidationError(_field_errors(exc)) from exc


def validate_attendance_form(form: AttendanceForm) -> NewAttendance:
    try:
        return NewAttendance.model_validate(form.model_dump())
    except ValidationError as exc:
        raise FormValidationError(_field_errors(exc)) from exc


# ── Server failures → form fields ──────────────────────────────────
def _structured_errors(exc: ApiError, fields: Iterable[str]) -> dict[str, str]:
    """Route a ``{"errors": {field: [messages]}}`` body field by field."""
    body = exc.body
    if not isinstance(body, dict) or not isinstance(body.get("errors"), dict):
        return {}
    known = set(fields)
    routed: dict[str, str] = {}
    leftovers: list[str] = []
    for field, value in body["errors"].items():
        messages = value if isinstance(value, (list, tuple)) else [value]
        text = ", ".join(str(m) for m in messages)
        if field in known:
            routed[field] = text
        else:
            leftovers.append(text)
    if routed and leftovers:
        routed["submit"] = ", ".join(leftovers)
    return routed


def _mentions_duplicate(message: str) -> bool:
    lowered = message.lower()
    return "duplicate" in lowered or "already exists" in lowered


def route_employee_error(exc: ApiError) -> dict[str, str]:
    routed = _structured_errors(exc, EmployeeForm.model_fields)
    if routed:
        return routed
    message = exc.user_message
    if _mentions_duplicate(message):
        return {"employee_id": message}
    if "email" in message.lower():
        return {"email": message}
    return {"submit": message}


def route_attendance_error(exc: ApiError) -> dict[str, str]:
    routed = _structured_errors(exc, AttendanceForm.model_fields)
    if routed:
        return routed
    message = exc.user_message
    if _mentions_duplicate(message):
        return {"submit": DUPLICATE_ATTENDANCE_MESSAGE}
    return {"submit": message}
