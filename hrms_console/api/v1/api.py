"""
V1 console router aggregator: wires all view modules together.
"""

from fastapi import APIRouter

from hrms_console.api.v1.endpoints import attendance, auth, dashboard, employees

api_router = APIRouter()

# Login entry point, logout, refresh, current user
api_router.include_router(auth.router)

# Dashboard statistics
api_router.include_router(dashboard.router)

# Employee table and form
api_router.include_router(employees.router)

# Attendance history and form
api_router.include_router(attendance.router)
