"""
Employee views: paginated table, create form, lookup, update, delete.

Every view fetches fresh data from the remote API; the console keeps no
copy between requests.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from pydantic import TypeAdapter

from hrms_console.api.v1.deps import get_employee_api
from hrms_console.clients.employees import EmployeeApi
from hrms_console.core.config import settings
from hrms_console.core.exceptions import ApiError, FormValidationError
from hrms_console.schemas.attendance import (
    Employee,
    EmployeeForm,
    EmployeeListView,
    EmployeeUpdate,
    FieldErrors,
    MutationResponse,
)
from hrms_console.services.forms import route_employee_error, validate_employee_form
from hrms_console.services.pagination import paginate

router = APIRouter(tags=["employees"])
logger = logging.getLogger(__name__)

_employee_list = TypeAdapter(list[Employee])


@router.get("/employees", response_model=EmployeeListView)
async def list_employees(
    page: int = Query(default=1, ge=1),
    api: EmployeeApi = Depends(get_employee_api),
) -> EmployeeListView:
    employees = _employee_list.validate_python(await api.list_all() or [])
    current = paginate(employees, page, settings.RECORDS_PER_PAGE)
    return EmployeeListView(
        employees=current.items,
        page=current.info(),
        empty_message=None if employees else "No employees found",
    )


@router.post(
    "/employees",
    response_model=MutationResponse,
    status_code=201,
    responses={422: {"model": FieldErrors}},
)
async def create_employee(
    body: EmployeeForm,
    api: EmployeeApi = Depends(get_employee_api),
) -> MutationResponse:
    new = validate_employee_form(body, settings.DEPARTMENTS)
    try:
        created = await api.create(new.model_dump())
    except ApiError as exc:
        if exc.status_code == 401:
            raise
        raise FormValidationError(
            route_employee_error(exc),
            message=exc.user_message,
            status_code=exc.status_code or 502,
        ) from exc

    logger.info("Created employee %s", new.employee_id)
    return MutationResponse(message="Employee added successfully!", data=created)


@router.get("/employees/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    api: EmployeeApi = Depends(get_employee_api),
) -> Employee:
    return Employee.model_validate(await api.get(employee_id))


@router.put("/employees/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    api: EmployeeApi = Depends(get_employee_api),
) -> Employee:
    updated = await api.update(employee_id, body.model_dump(exclude_unset=True))
    logger.info("Updated employee %s", employee_id)
    return Employee.model_validate(updated)


@router.delete("/employees/{employee_id}", response_model=MutationResponse)
async def delete_employee(
    employee_id: str,
    api: EmployeeApi = Depends(get_employee_api),
) -> MutationResponse:
    """Delete by business key; the caller drops the row from its own table."""
    await api.delete(employee_id)
    logger.info("Deleted employee %s", employee_id)
    return MutationResponse(message=f"Employee '{employee_id}' deleted")
