# app/mappers/__init__.py
from .department import to_department_out, to_department_entity
from .employee import to_employee_out, to_employee_entity
