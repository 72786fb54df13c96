from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from hr_console.models.employee import Employee, EmployeeCreate, EmployeeUpdate
from hr_console.models.leave import LeaveRequest
from hr_console.models.performance import PerformanceReview
from hr_console.services.crud import RecordNotFoundError
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service
from hr_console.services.performance_service import performance_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    q: str = "",
    department: str | None = None,
    status_filter: str | None = Query(None, alias="status"),  # noqa: B008
):
    try:
        if q or department or status_filter:
            return await employee_service.search(q, department=department, status=status_filter)
        return await employee_service.list_all()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load employees",
        ) from err


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: int):
    employee = await employee_service.get_by_id(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    return employee


@router.get("/{employee_id}/leave-requests", response_model=list[LeaveRequest])
async def get_employee_leave(employee_id: int):
    return await leave_service.get_by_employee_id(employee_id)


@router.get("/{employee_id}/performance-reviews", response_model=list[PerformanceReview])
async def get_employee_reviews(employee_id: int):
    return await performance_service.get_by_employee_id(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(request: EmployeeCreate):
    try:
        return await employee_service.create(request.model_dump(mode="json"))
    except Exception as err:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save employee",
        ) from err


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(employee_id: int, request: EmployeeUpdate):
    try:
        return await employee_service.update(employee_id, request.changes())
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    except Exception as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save employee",
        ) from err


@router.delete("/{employee_id}")
async def delete_employee(employee_id: int):
    try:
        await employee_service.delete(employee_id)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return {"success": True}
