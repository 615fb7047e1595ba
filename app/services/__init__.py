# app/services/__init__.py
from .department import DepartmentService
from .employee import EmployeeService
from .inventory import InventoryService
