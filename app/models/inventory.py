# app/models/inventory.py
from pydantic import BaseModel, ConfigDict, Field

class InventoryModel(BaseModel):
    id: int = Field(default=0, alias="_id")
    sku_code: str
    quantity: int = 0

    model_config = ConfigDict(populate_by_name=True)
