# app/repositories/inventory.py
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.models.inventory import InventoryModel

class InventoryRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db.inventory

    async def find_by_sku_code(self, sku_code: str) -> Optional[InventoryModel]:
        item = await self.collection.find_one({"sku_code": sku_code})
        return InventoryModel(**item) if item else None
