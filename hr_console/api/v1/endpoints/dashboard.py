from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, status

from hr_console.models.dashboard import DashboardSummary, ReportSummary
from hr_console.services import aggregator
from hr_console.services.department_service import department_service
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])


async def _load_snapshots():
    employees = await employee_service.list_all()
    departments = await department_service.list_all()
    leave_requests = await leave_service.list_all()
    return employees, departments, leave_requests


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(as_of: date | None = None):
    try:
        employees, departments, leave_requests = await _load_snapshots()
    except Exception as err:
        logger.exception("Failed to load dashboard data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load dashboard data",
        ) from err

    return aggregator.dashboard_summary(employees, departments, leave_requests, as_of or date.today())


@router.get("/reports", response_model=ReportSummary)
async def get_reports(as_of: date | None = None):
    try:
        employees, departments, leave_requests = await _load_snapshots()
    except Exception as err:
        logger.exception("Failed to load report data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load report data",
        ) from err

    return aggregator.report_summary(employees, departments, leave_requests, as_of or date.today())
