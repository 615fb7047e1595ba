# app/models/employee.py
from pydantic import BaseModel, ConfigDict, Field

class EmployeeModel(BaseModel):
    id: int = Field(default=0, alias="_id")
    first_name: str
    last_name: str
    email: str
    department_code: str

    model_config = ConfigDict(populate_by_name=True)
