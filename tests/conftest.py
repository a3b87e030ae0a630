"""
Shared test fixtures for the HRMS Console test suite.

The remote HRMS API is simulated in-process with ``httpx.MockTransport``;
the console app is driven through ``ASGITransport`` with its session and
HTTP client swapped via ``dependency_overrides``.
"""

import json
import os
import sys
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import MagicMock

import httpx
import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["API_BASE_URL"] = "http://hrms.test/api/v1"
os.environ["CORS_ORIGINS"] = '["*"]'

from httpx import ASGITransport, AsyncClient

from hrms_console.api.v1.deps import get_http, get_session
from hrms_console.clients.http import ApiClient, create_http_client
from hrms_console.core.session import MemorySessionStore
from hrms_console.main import app

API_PREFIX = "/api/v1"
BASE_URL = "http://hrms.test/api/v1"


class FakeHrmsApi:
    """Minimal in-memory stand-in for the remote HRMS REST API."""

    def __init__(self) -> None:
        self.employees: list[dict] = []
        self.attendance: list[dict] = []
        self.requests: list[httpx.Request] = []
        self._failures: dict[tuple[str, str], object] = {}
        self._next_id = 1

    # ── Seeding / failure injection ────────────────────────────────
    def add_employee(self, employee_id, full_name="Jane Doe", email=None, department="Engineering"):
        emp = {
            "id": self._bump(),
            "employee_id": employee_id,
            "full_name": full_name,
            "email": email or f"{employee_id.lower()}@example.com",
            "department": department,
        }
        self.employees.append(emp)
        return emp

    def add_attendance(self, employee_id, attendance_date, status="PRESENT", created_at=None):
        rec = {
            "id": self._bump(),
            "employee_id": employee_id,
            "attendance_date": attendance_date,
            "status": status,
            "created_at": created_at,
        }
        self.attendance.append(rec)
        return rec

    def fail(self, method, path, status=500, json=None, content=None, exc=None):
        """Make ``method path`` fail with a response or raise ``exc``."""
        if exc is not None:
            self._failures[(method, path)] = exc
        elif json is not None:
            self._failures[(method, path)] = lambda: httpx.Response(status, json=json)
        else:
            self._failures[(method, path)] = lambda: httpx.Response(status, content=content or b"")

    def _bump(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    # ── Transport handler ──────────────────────────────────────────
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(API_PREFIX):]
        failure = self._failures.get((request.method, path))
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return failure()

        parts = [p for p in path.split("/") if p]
        if parts[:1] == ["employees"]:
            return self._employees(request, parts[1:])
        if parts[:1] == ["attendance"]:
            return self._attendance(request, parts[1:])
        return httpx.Response(404, json={"detail": "Not Found"})

    def _find_employee(self, employee_id):
        return next((e for e in self.employees if e["employee_id"] == employee_id), None)

    def _employees(self, request, rest):
        if not rest:
            if request.method == "GET":
                return httpx.Response(200, json=self.employees)
            body = httpx_json(request)
            if self._find_employee(body["employee_id"]):
                return httpx.Response(
                    409,
                    json={"detail": {"message": f"Employee with ID '{body['employee_id']}' already exists"}},
                )
            emp = {"id": self._bump(), **body}
            self.employees.append(emp)
            return httpx.Response(201, json=emp)

        emp = self._find_employee(rest[0])
        if emp is None:
            return httpx.Response(404, json={"detail": {"message": "Employee not found"}})
        if request.method == "GET":
            return httpx.Response(200, json=emp)
        if request.method == "PUT":
            emp.update(httpx_json(request))
            return httpx.Response(200, json=emp)
        self.employees.remove(emp)
        return httpx.Response(204)

    def _attendance(self, request, rest):
        params = request.url.params
        if not rest:
            if request.method == "POST":
                body = httpx_json(request)
                if self._find_employee(body["employee_id"]) is None:
                    return httpx.Response(404, json={"detail": {"message": "Employee not found"}})
                for rec in self.attendance:
                    if (rec["employee_id"], rec["attendance_date"]) == (body["employee_id"], body["attendance_date"]):
                        return httpx.Response(
                            409, json={"detail": {"message": "Duplicate attendance record"}}
                        )
                rec = self.add_attendance(
                    body["employee_id"],
                    body["attendance_date"],
                    body["status"],
                    created_at=datetime.now(timezone.utc).isoformat(),
                )
                return httpx.Response(201, json=rec)
            records = self._filter(self.attendance, params)
            if "status_filter" in params:
                records = [r for r in records if r["status"] == params["status_filter"]]
            return httpx.Response(200, json=records)

        if request.method == "GET":
            records = [r for r in self.attendance if r["employee_id"] == rest[0]]
            return httpx.Response(200, json=self._filter(records, params))

        rec = next((r for r in self.attendance if str(r["id"]) == rest[0]), None)
        if rec is None:
            return httpx.Response(404, json={"detail": {"message": "Attendance record not found"}})
        if request.method == "PUT":
            rec.update(httpx_json(request))
            return httpx.Response(200, json=rec)
        self.attendance.remove(rec)
        return httpx.Response(200, json={"message": "Attendance record deleted"})

    @staticmethod
    def _filter(records, params):
        if "start_date" in params:
            records = [r for r in records if r["attendance_date"] >= params["start_date"]]
        if "end_date" in params:
            records = [r for r in records if r["attendance_date"] <= params["end_date"]]
        return records


def httpx_json(request: httpx.Request):
    return json.loads(request.content)


@pytest.fixture
def fake_api() -> FakeHrmsApi:
    return FakeHrmsApi()


@pytest.fixture
def session() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def navigate() -> MagicMock:
    return MagicMock()


@pytest.fixture
async def http(fake_api: FakeHrmsApi) -> AsyncGenerator[httpx.AsyncClient, None]:
    client = create_http_client(BASE_URL, transport=httpx.MockTransport(fake_api.handler))
    yield client
    await client.aclose()


@pytest.fixture
def api_client(http, session, navigate) -> ApiClient:
    return ApiClient(http, session, on_unauthorized=navigate)


@pytest.fixture
async def async_client(http, session) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the console app."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_http] = lambda: http
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://console") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(session: MemorySessionStore) -> str:
    token = "test-token"
    session.set(token)
    return token
