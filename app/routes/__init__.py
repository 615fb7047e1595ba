#app/routes/__init__.py

from .department import router as department_router
from .employee import router as employee_router
from .inventory import router as inventory_router
