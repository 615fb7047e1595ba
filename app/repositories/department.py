# app/repositories/department.py
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.database import next_sequence
from app.models.department import DepartmentModel

class DepartmentRepository:
    """Keyed access to the ``departments`` collection"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.departments

    async def find_all(self, skip: int = 0, limit: int = 100) -> List[DepartmentModel]:
        departments = await self.collection.find().skip(skip).limit(limit).to_list(length=limit)
        return [DepartmentModel(**department) for department in departments]

    async def find_by_id(self, department_id: int) -> Optional[DepartmentModel]:
        department = await self.collection.find_one({"_id": department_id})
        return DepartmentModel(**department) if department else None

    async def find_by_code(self, code: str) -> Optional[DepartmentModel]:
        department = await self.collection.find_one({"code": code})
        return DepartmentModel(**department) if department else None

    async def exists_by_id(self, department_id: int) -> bool:
        return await self.collection.count_documents({"_id": department_id}) > 0

    async def exists_by_code(self, code: str) -> bool:
        return await self.collection.count_documents({"code": code}) > 0

    async def insert(self, department: DepartmentModel) -> DepartmentModel:
        department.id = await next_sequence(self.db, "departments")
        await self.collection.insert_one(department.model_dump(by_alias=True))
        return department

    async def replace(self, department: DepartmentModel) -> Optional[DepartmentModel]:
        document = department.model_dump(by_alias=True)
        result = await self.collection.replace_one({"_id": department.id}, document)
        return department if result.matched_count else None

    async def delete_by_id(self, department_id: int) -> bool:
        result = await self.collection.delete_one({"_id": department_id})
        return result.deleted_count > 0
