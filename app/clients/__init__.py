# app/clients/__init__.py
from .department_client import DepartmentClient
