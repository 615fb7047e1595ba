# app/schemas/employee.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from .department import DepartmentOut

class EmployeeBase(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    department_code: str = Field(..., min_length=1, description="Code of the employee's department")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    id: int = Field(..., description="Must match the ID in the request path")

class EmployeeOut(EmployeeBase):
    id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class EmployeeWithDepartmentOut(BaseModel):
    """Employee paired with the department looked up by its code"""
    employee: EmployeeOut
    department: Optional[DepartmentOut] = Field(
        None, description="Empty when the department service does not know the employee's code"
    )
