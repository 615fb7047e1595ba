"""
API Dependencies

Builds the services each router needs from the database handle and settings.
Tests override ``get_database`` and ``get_department_client``.
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.clients.department_client import DepartmentClient
from app.config import get_settings
from app.database import get_database
from app.repositories import DepartmentRepository, EmployeeRepository, InventoryRepository
from app.services import DepartmentService, EmployeeService, InventoryService


def get_department_client() -> DepartmentClient:
    settings = get_settings()
    return DepartmentClient(
        base_url=settings.DEPARTMENT_SERVICE_URL,
        timeout=settings.DEPARTMENT_CLIENT_TIMEOUT,
    )


def get_department_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> DepartmentService:
    return DepartmentService(DepartmentRepository(db))


def get_employee_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
    department_client: DepartmentClient = Depends(get_department_client),
) -> EmployeeService:
    """Employee service wired to the remote department lookup"""
    return EmployeeService(EmployeeRepository(db), department_client)


def get_inventory_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> InventoryService:
    return InventoryService(InventoryRepository(db))
