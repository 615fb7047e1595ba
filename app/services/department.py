# app/services/department.py
import logging
from typing import List
from pymongo.errors import DuplicateKeyError
from app.exceptions import Conflict, NotFound
from app.mappers.department import to_department_entity, to_department_out
from app.repositories.department import DepartmentRepository
from app.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate
from app.utils.validation import ensure_valid_id

logger = logging.getLogger(__name__)

def department_not_found(department_id: int) -> NotFound:
    return NotFound(
        message="Department not found",
        details=f"Department with ID {department_id} not found",
    )

def department_code_conflict(code: str) -> Conflict:
    return Conflict(
        message="Department code already registered",
        details=f"Department with code '{code}' already exists",
    )

class DepartmentService:
    def __init__(self, repository: DepartmentRepository):
        self.repository = repository

    async def find_all(self, skip: int = 0, limit: int = 100) -> List[DepartmentOut]:
        departments = await self.repository.find_all(skip=skip, limit=limit)
        return [to_department_out(department) for department in departments]

    async def find_by_id(self, department_id: int) -> DepartmentOut:
        ensure_valid_id("Department", department_id)
        department = await self.repository.find_by_id(department_id)
        if department is None:
            raise department_not_found(department_id)
        return to_department_out(department)

    async def find_by_code(self, code: str) -> DepartmentOut:
        department = await self.repository.find_by_code(code)
        if department is None:
            raise NotFound(
                message="Department not found",
                details=f"No department found with code: {code}",
            )
        return to_department_out(department)

    async def save(self, department: DepartmentCreate) -> DepartmentOut:
        if await self.repository.exists_by_code(department.code):
            logger.warning("Rejected department with duplicate code %s", department.code)
            raise department_code_conflict(department.code)
        try:
            saved = await self.repository.insert(to_department_entity(department, department_id=0))
        except DuplicateKeyError:
            raise department_code_conflict(department.code)
        logger.info("Created department %s (%s)", saved.id, saved.code)
        return to_department_out(saved)

    async def update(self, department: DepartmentUpdate) -> DepartmentOut:
        ensure_valid_id("Department", department.id)
        if not await self.repository.exists_by_id(department.id):
            raise department_not_found(department.id)

        # The code may stay the same, but it may not move onto another department's code
        owner = await self.repository.find_by_code(department.code)
        if owner is not None and owner.id != department.id:
            logger.warning("Rejected update of department %s to taken code %s", department.id, department.code)
            raise department_code_conflict(department.code)

        try:
            updated = await self.repository.replace(to_department_entity(department, department_id=department.id))
        except DuplicateKeyError:
            raise department_code_conflict(department.code)
        if updated is None:
            raise department_not_found(department.id)
        logger.info("Updated department %s", updated.id)
        return to_department_out(updated)

    async def delete(self, department_id: int) -> None:
        ensure_valid_id("Department", department_id)
        if not await self.repository.exists_by_id(department_id):
            raise department_not_found(department_id)
        await self.repository.delete_by_id(department_id)
        logger.info("Deleted department %s", department_id)
