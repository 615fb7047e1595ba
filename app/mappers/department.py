# app/mappers/department.py
from typing import Union
from app.models.department import DepartmentModel
from app.schemas.department import DepartmentCreate, DepartmentOut, DepartmentUpdate

def to_department_out(department: DepartmentModel) -> DepartmentOut:
    return DepartmentOut(**department.model_dump())

def to_department_entity(department: Union[DepartmentCreate, DepartmentUpdate], department_id: int) -> DepartmentModel:
    return DepartmentModel(id=department_id, **department.model_dump(exclude={"id"}))
