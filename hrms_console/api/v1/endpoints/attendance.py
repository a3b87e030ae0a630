"""
Attendance views: filtered, paginated history and the mark-attendance form.
"""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from pydantic import TypeAdapter

from hrms_console.api.v1.deps import get_attendance_api, get_employee_api
from hrms_console.clients.attendance import AttendanceApi
from hrms_console.clients.employees import EmployeeApi
from hrms_console.clients.http import fetch_all
from hrms_console.core.config import settings
from hrms_console.core.exceptions import ApiError, FormValidationError
from hrms_console.schemas.attendance import (
    AttendanceForm,
    AttendanceListView,
    AttendanceRecord,
    AttendanceStatus,
    AttendanceUpdate,
    Employee,
    FieldErrors,
    MutationResponse,
)
from hrms_console.services.forms import route_attendance_error, validate_attendance_form
from hrms_console.services.pagination import paginate
from hrms_console.services.stats import join_names

router = APIRouter(tags=["attendance"])
logger = logging.getLogger(__name__)

_employee_list = TypeAdapter(list[Employee])
_record_list = TypeAdapter(list[AttendanceRecord])


@router.get("/attendance", response_model=AttendanceListView)
async def list_attendance(
    employee_id: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    status_filter: AttendanceStatus | None = None,
    page: int = Query(default=1, ge=1),
    employees_api: EmployeeApi = Depends(get_employee_api),
    attendance_api: AttendanceApi = Depends(get_attendance_api),
) -> AttendanceListView:
    """Attendance history for everyone, or for one employee when selected."""
    if employee_id:
        fetch = attendance_api.list_by_employee(employee_id, start_date, end_date)
    else:
        fetch = attendance_api.list_all(
            start_date,
            end_date,
            status_filter.value if status_filter else None,
        )

    raw_employees, raw_records = await fetch_all(employees_api.list_all(), fetch)
    employees = _employee_list.validate_python(raw_employees or [])
    records = _record_list.validate_python(raw_records or [])

    # the per-employee endpoint has no status filter
    if employee_id and status_filter:
        records = [r for r in records if r.status == status_filter]

    current = paginate(records, page, settings.RECORDS_PER_PAGE)
    return AttendanceListView(
        records=join_names(employees, current.items),
        page=current.info(),
        employee_id=employee_id,
        empty_message=None if records else "No attendance records found",
    )


@router.post(
    "/attendance",
    response_model=MutationResponse,
    status_code=201,
    responses={422: {"model": FieldErrors}},
)
async def mark_attendance(
    body: AttendanceForm,
    api: AttendanceApi = Depends(get_attendance_api),
) -> MutationResponse:
    new = validate_attendance_form(body)
    try:
        created = await api.mark(new.model_dump(mode="json"))
    except ApiError as exc:
        if exc.status_code == 401:
            raise
        raise FormValidationError(
            route_attendance_error(exc),
            message=exc.user_message,
            status_code=exc.status_code or 502,
        ) from exc

    logger.info(
        "Marked %s for %s on %s",
        new.status.value,
        new.employee_id,
        new.attendance_date.isoformat(),
    )
    return MutationResponse(message="Attendance marked successfully!", data=created)


@router.put("/attendance/{attendance_id}", response_model=AttendanceRecord)
async def update_attendance(
    attendance_id: int,
    body: AttendanceUpdate,
    api: AttendanceApi = Depends(get_attendance_api),
) -> AttendanceRecord:
    updated = await api.update(
        attendance_id, body.model_dump(mode="json", exclude_unset=True)
    )
    logger.info("Updated attendance record %d", attendance_id)
    return AttendanceRecord.model_validate(updated)


@router.delete("/attendance/{attendance_id}", response_model=MutationResponse)
async def delete_attendance(
    attendance_id: int,
    api: AttendanceApi = Depends(get_attendance_api),
) -> MutationResponse:
    await api.delete(attendance_id)
    logger.info("Deleted attendance record %d", attendance_id)
    return MutationResponse(message=f"Attendance record {attendance_id} deleted")
