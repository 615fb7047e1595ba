from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from app.dependencies import get_employee_service
from app.exceptions import BadRequest
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeWithDepartmentOut
from app.schemas.error import ErrorResponse
from app.services.employee import EmployeeService

router = APIRouter(prefix="/employees")

@router.get("", response_model=List[EmployeeOut])
async def get_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    service: EmployeeService = Depends(get_employee_service),
):
    """List employees one page at a time; pages hold at most 100, use skip to walk the rest"""
    return await service.find_all(skip=skip, limit=limit)

@router.get("/email/{email}", response_model=EmployeeOut, responses={404: {"model": ErrorResponse}})
async def get_employee_by_email(email: str, service: EmployeeService = Depends(get_employee_service)):
    return await service.find_by_email(email)

@router.get(
    "/{employee_id}",
    response_model=EmployeeOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return await service.find_by_id(employee_id)

@router.get(
    "/{employee_id}/department",
    response_model=EmployeeWithDepartmentOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def get_employee_with_department(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return await service.get_with_department(employee_id)

@router.post(
    "/create-employee",
    response_model=EmployeeOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_employee(employee: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    return await service.save(employee)

@router.put(
    "/update-employee/{employee_id}",
    response_model=EmployeeOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_employee(
    employee_id: int,
    employee: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    if employee.id != employee_id:
        raise BadRequest(
            message="Employee ID mismatch",
            details=f"Path ID {employee_id} does not match body ID {employee.id}",
        )
    return await service.update(employee)

@router.delete(
    "/delete-employee/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    await service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
