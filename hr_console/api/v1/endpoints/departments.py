from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from hr_console.models.dashboard import DepartmentStat
from hr_console.models.department import Department, DepartmentCreate, DepartmentUpdate
from hr_console.services import aggregator
from hr_console.services.crud import RecordNotFoundError
from hr_console.services.department_service import department_service
from hr_console.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[Department])
async def list_departments():
    try:
        return await department_service.list_all()
    except Exception as err:
        logger.exception("Failed to list departments")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load departments",
        ) from err


@router.get("/stats", response_model=list[DepartmentStat])
async def list_department_stats():
    departments = await department_service.list_all()
    employees = await employee_service.list_all()
    return aggregator.department_stats(departments, employees)


@router.get("/{department_id}", response_model=Department)
async def get_department(department_id: int):
    department = await department_service.get_by_id(department_id)
    if not department:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Department {department_id} not found",
        )
    return department


@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(request: DepartmentCreate):
    return await department_service.create(request.model_dump(mode="json"))


@router.put("/{department_id}", response_model=Department)
async def update_department(department_id: int, request: DepartmentUpdate):
    try:
        return await department_service.update(department_id, request.changes())
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.delete("/{department_id}")
async def delete_department(department_id: int):
    try:
        await department_service.delete(department_id)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return {"success": True}
