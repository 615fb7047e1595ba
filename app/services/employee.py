# app/services/employee.py
import logging
from typing import List
from pydantic import EmailStr, TypeAdapter, ValidationError
from pymongo.errors import DuplicateKeyError
from app.clients.department_client import DepartmentClient
from app.exceptions import Conflict, NotFound
from app.mappers.employee import to_employee_entity, to_employee_out
from app.repositories.employee import EmployeeRepository
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate, EmployeeWithDepartmentOut
from app.utils.validation import ensure_valid_id

logger = logging.getLogger(__name__)

email_adapter = TypeAdapter(EmailStr)

def employee_not_found(employee_id: int) -> NotFound:
    return NotFound(
        message="Employee not found",
        details=f"No employee found with ID: {employee_id}",
    )

def email_conflict(email: str) -> Conflict:
    return Conflict(
        message="Email already registered",
        details=f"Employee with email '{email}' already exists",
    )

class EmployeeService:
    def __init__(self, repository: EmployeeRepository, department_client: DepartmentClient):
        self.repository = repository
        self.department_client = department_client

    async def find_all(self, skip: int = 0, limit: int = 100) -> List[EmployeeOut]:
        employees = await self.repository.find_all(skip=skip, limit=limit)
        return [to_employee_out(employee) for employee in employees]

    async def find_by_id(self, employee_id: int) -> EmployeeOut:
        ensure_valid_id("Employee", employee_id)
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise employee_not_found(employee_id)
        return to_employee_out(employee)

    async def find_by_email(self, email: str) -> EmployeeOut:
        # Stored addresses went through EmailStr, so compare in the same form
        try:
            normalized = email_adapter.validate_python(email)
        except ValidationError:
            normalized = None
        employee = await self.repository.find_by_email(normalized) if normalized else None
        if employee is None:
            raise NotFound(
                message="Employee not found",
                details=f"No employee found with email: {email}",
            )
        return to_employee_out(employee)

    async def get_with_department(self, employee_id: int) -> EmployeeWithDepartmentOut:
        """
        Return the employee together with its department.

        The department is fetched from the department service by the stored
        department code. An unknown code leaves ``department`` empty; a failed
        lookup raises DependencyUnavailable.
        """
        ensure_valid_id("Employee", employee_id)
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise employee_not_found(employee_id)

        department = await self.department_client.get_department_by_code(employee.department_code)
        if department is None:
            logger.warning("Employee %s references unknown department %s", employee.id, employee.department_code)
        return EmployeeWithDepartmentOut(employee=to_employee_out(employee), department=department)

    async def save(self, employee: EmployeeCreate) -> EmployeeOut:
        if await self.repository.exists_by_email(employee.email):
            logger.warning("Rejected employee with duplicate email %s", employee.email)
            raise email_conflict(employee.email)
        try:
            saved = await self.repository.insert(to_employee_entity(employee, employee_id=0))
        except DuplicateKeyError:
            raise email_conflict(employee.email)
        logger.info("Created employee %s", saved.id)
        return to_employee_out(saved)

    async def update(self, employee: EmployeeUpdate) -> EmployeeOut:
        ensure_valid_id("Employee", employee.id)
        if not await self.repository.exists_by_id(employee.id):
            raise employee_not_found(employee.id)

        owner = await self.repository.find_by_email(employee.email)
        if owner is not None and owner.id != employee.id:
            logger.warning("Rejected update of employee %s to taken email %s", employee.id, employee.email)
            raise email_conflict(employee.email)

        try:
            updated = await self.repository.replace(to_employee_entity(employee, employee_id=employee.id))
        except DuplicateKeyError:
            raise email_conflict(employee.email)
        if updated is None:
            raise employee_not_found(employee.id)
        logger.info("Updated employee %s", updated.id)
        return to_employee_out(updated)

    async def delete(self, employee_id: int) -> None:
        ensure_valid_id("Employee", employee_id)
        if not await self.repository.exists_by_id(employee_id):
            raise employee_not_found(employee_id)
        await self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
