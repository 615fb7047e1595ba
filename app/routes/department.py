from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from app.dependencies import get_department_service
from app.exceptions import BadRequest
from app.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentOut
from app.schemas.error import ErrorResponse
from app.services.department import DepartmentService

router = APIRouter(prefix="/departments")

@router.get("", response_model=List[DepartmentOut])
async def get_departments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    service: DepartmentService = Depends(get_department_service),
):
    """List departments one page at a time; pages hold at most 100, use skip to walk the rest"""
    return await service.find_all(skip=skip, limit=limit)

@router.get(
    "/code/{department_code:path}",
    response_model=DepartmentOut,
    responses={404: {"model": ErrorResponse}},
)
async def get_department_by_code(department_code: str, service: DepartmentService = Depends(get_department_service)):
    """Codes may contain slashes, so the whole remaining path is the code"""
    return await service.find_by_code(department_code)

@router.get(
    "/{department_id}",
    response_model=DepartmentOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_department(department_id: int, service: DepartmentService = Depends(get_department_service)):
    return await service.find_by_id(department_id)

@router.post(
    "/create-department",
    response_model=DepartmentOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_department(department: DepartmentCreate, service: DepartmentService = Depends(get_department_service)):
    return await service.save(department)

@router.put(
    "/update-department/{department_id}",
    response_model=DepartmentOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_department(
    department_id: int,
    department: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service),
):
    if department.id != department_id:
        raise BadRequest(
            message="Department ID mismatch",
            details=f"Path ID {department_id} does not match body ID {department.id}",
        )
    return await service.update(department)

@router.delete(
    "/delete-department/{department_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_department(department_id: int, service: DepartmentService = Depends(get_department_service)):
    await service.delete(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
