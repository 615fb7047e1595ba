# app/repositories/__init__.py
from .department import DepartmentRepository
from .employee import EmployeeRepository
from .inventory import InventoryRepository
