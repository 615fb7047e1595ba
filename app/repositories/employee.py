# app/repositories/employee.py
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.database import next_sequence
from app.models.employee import EmployeeModel

class EmployeeRepository:
    """Keyed access to the ``employees`` collection"""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.employees

    async def find_all(self, skip: int = 0, limit: int = 100) -> List[EmployeeModel]:
        employees = await self.collection.find().skip(skip).limit(limit).to_list(length=limit)
        return [EmployeeModel(**employee) for employee in employees]

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        employee = await self.collection.find_one({"_id": employee_id})
        return EmployeeModel(**employee) if employee else None

    async def find_by_email(self, email: str) -> Optional[EmployeeModel]:
        employee = await self.collection.find_one({"email": email})
        return EmployeeModel(**employee) if employee else None

    async def exists_by_id(self, employee_id: int) -> bool:
        return await self.collection.count_documents({"_id": employee_id}) > 0

    async def exists_by_email(self, email: str) -> bool:
        return await self.collection.count_documents({"email": email}) > 0

    async def insert(self, employee: EmployeeModel) -> EmployeeModel:
        employee.id = await next_sequence(self.db, "employees")
        await self.collection.insert_one(employee.model_dump(by_alias=True))
        return employee

    async def replace(self, employee: EmployeeModel) -> Optional[EmployeeModel]:
        document = employee.model_dump(by_alias=True)
        result = await self.collection.replace_one({"_id": employee.id}, document)
        return employee if result.matched_count else None

    async def delete_by_id(self, employee_id: int) -> bool:
        result = await self.collection.delete_one({"_id": employee_id})
        return result.deleted_count > 0
