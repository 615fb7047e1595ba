# app/schemas/department.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class DepartmentBase(BaseModel):
    name: str = Field(..., min_length=1, description="Department name")
    code: str = Field(..., min_length=1, description="Department code, referenced by employees")
    description: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class DepartmentCreate(DepartmentBase):
    pass

class DepartmentUpdate(DepartmentBase):
    id: int = Field(..., description="Must match the ID in the request path")

class DepartmentOut(DepartmentBase):
    id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
