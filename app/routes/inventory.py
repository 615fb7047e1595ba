from fastapi import APIRouter, Depends
from app.dependencies import get_inventory_service
from app.services.inventory import InventoryService

router = APIRouter()

@router.get("/inventory/{sku_code}", response_model=bool)
async def is_in_stock(sku_code: str, service: InventoryService = Depends(get_inventory_service)):
    return await service.is_in_stock(sku_code)
