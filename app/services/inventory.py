# app/services/inventory.py
from app.repositories.inventory import InventoryRepository

class InventoryService:
    def __init__(self, repository: InventoryRepository):
        self.repository = repository

    async def is_in_stock(self, sku_code: str) -> bool:
        item = await self.repository.find_by_sku_code(sku_code)
        return item is not None and item.quantity > 0
