# app/schemas/__init__.py
from .department import DepartmentCreate, DepartmentUpdate, DepartmentOut
from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeWithDepartmentOut
from .error import ErrorResponse
