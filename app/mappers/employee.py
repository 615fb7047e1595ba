# app/mappers/employee.py
from typing import Union
from app.models.employee import EmployeeModel
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate

def to_employee_out(employee: EmployeeModel) -> EmployeeOut:
    return EmployeeOut(**employee.model_dump())

def to_employee_entity(employee: Union[EmployeeCreate, EmployeeUpdate], employee_id: int) -> EmployeeModel:
    return EmployeeModel(id=employee_id, **employee.model_dump(exclude={"id"}))
