# app/models/department.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class DepartmentModel(BaseModel):
    id: int = Field(default=0, alias="_id")
    name: str
    code: str
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
