"""
Shared fixtures: an in-memory motor database and an HTTP client bound to the app.
"""

import httpx
import pytest
from mongomock_motor import AsyncMongoMockClient

from app.clients.department_client import DepartmentClient
from app.database import create_indexes, get_database
from app.dependencies import get_department_client
from app.main import app


@pytest.fixture
async def db():
    database = AsyncMongoMockClient()["company_services_test"]
    await create_indexes(database)
    return database


@pytest.fixture
async def client(db):
    # The employee routes reach the department routes over HTTP, served by the same app
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_department_client] = lambda: DepartmentClient(
        base_url="http://departments/api/departments",
        transport=httpx.ASGITransport(app=app),
    )
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def department_payload() -> dict:
    return {"name": "Research", "code": "D1", "description": "Research and development"}


@pytest.fixture
def employee_payload() -> dict:
    return {"firstName": "A", "lastName": "B", "email": "a@b.com", "departmentCode": "D1"}
