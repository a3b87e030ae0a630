"""
Dashboard statistics derived from already-fetched lists.

Every function here is pure: ``f(employees, records) -> view``.  Empty
inputs produce empty / zero aggregates.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, time, timezone

from hrms_console.schemas.attendance import (
    AttendanceRecord,
    AttendanceRow,
    AttendanceStatus,
    DashboardView,
    DepartmentStat,
    Employee,
    TopPerformer,
    Totals,
)

UNKNOWN = "Unknown"


def _ensure_utc(dt: datetime) -> datetime:
    """Normalise a potentially-naive timestamp to UTC-aware."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def compute_totals(
    employees: Sequence[Employee], records: Sequence[AttendanceRecord]
) -> Totals:
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
    return Totals(
        total_employees=len(employees),
        total_records=len(records),
        present_days=present,
        absent_days=absent,
    )


def present_days_by_employee(records: Sequence[AttendanceRecord]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for record in records:
        if record.status == AttendanceStatus.PRESENT:
            counts[record.employee_id] = counts.get(record.employee_id, 0) + 1
    return counts


def employee_index(employees: Sequence[Employee]) -> dict[str, Employee]:
    """Map business key to employee; the first occurrence wins."""
    index: dict[str, Employee] = {}
    for emp in employees:
        index.setdefault(emp.employee_id, emp)
    return index


def top_performers(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    limit: int = 5,
) -> list[TopPerformer]:
    """Employees with the most present days, at most ``limit`` of them.

    Only employees with at least one present day are ranked.  Ties keep
    the order in which the employee first appears in ``records``.
    """
    index = employee_index(employees)
    ranked = sorted(
        present_days_by_employee(records).items(),
        key=lambda item: item[1],
        reverse=True,
    )
    performers = []
    for employee_id, days in ranked[:limit]:
        emp = index.get(employee_id)
        performers.append(
            TopPerformer(
                employee_id=employee_id,
                employee_name=emp.full_name if emp else UNKNOWN,
                department=emp.department if emp else UNKNOWN,
                present_days=days,
            )
        )
    return performers


def department_stats(
    employees: Sequence[Employee], records: Sequence[AttendanceRecord]
) -> dict[str, DepartmentStat]:
    present = present_days_by_employee(records)
    totals: dict[str, list[int]] = {}
    for emp in employees:
        acc = totals.setdefault(emp.department, [0, 0])
        acc[0] += 1
        acc[1] += present.get(emp.employee_id, 0)
    return {
        dept: DepartmentStat(total=total, present_days=days)
        for dept, (total, days) in totals.items()
    }


def activity_timestamp(record: AttendanceRecord) -> datetime:
    """``created_at`` if the server sent one, else the attendance date."""
    if record.created_at is not None:
        return _ensure_utc(record.created_at)
    return datetime.combine(record.attendance_date, time.min, tzinfo=timezone.utc)


def join_names(
    employees: Sequence[Employee], records: Sequence[AttendanceRecord]
) -> list[AttendanceRow]:
    index = employee_index(employees)
    rows = []
    for record in records:
        emp = index.get(record.employee_id)
        rows.append(
            AttendanceRow(
                id=record.id,
                employee_id=record.employee_id,
                employee_name=emp.full_name if emp else UNKNOWN,
                attendance_date=record.attendance_date,
                status=record.status,
                created_at=record.created_at,
            )
        )
    return rows


def recent_activity(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    limit: int = 10,
) -> list[AttendanceRow]:
    # sorted() stays stable with reverse=True: equal timestamps keep server order
    latest = sorted(records, key=activity_timestamp, reverse=True)[:limit]
    return join_names(employees, latest)


def dashboard_stats(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    *,
    top_limit: int = 5,
    recent_limit: int = 10,
) -> DashboardView:
    return DashboardView(
        totals=compute_totals(employees, records),
        top_performers=top_performers(employees, records, limit=top_limit),
        department_stats=department_stats(employees, records),
        recent_activity=recent_activity(employees, records, limit=recent_limit),
    )
