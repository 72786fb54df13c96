from __future__ import annotations

from fastapi import APIRouter

from hr_console.core.config import settings
from hr_console.services.department_service import department_service
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service
from hr_console.services.notification_service import notification_service
from hr_console.services.performance_service import performance_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services = {
        "employees": employee_service,
        "departments": department_service,
        "leave_requests": leave_service,
        "performance_reviews": performance_service,
        "notifications": notification_service,
    }
    statuses = {name: "ok" if service.initialized else "not_initialized" for name, service in services.items()}

    return {
        "status": "healthy" if all(v == "ok" for v in statuses.values()) else "degraded",
        "version": settings.APP_VERSION,
        "services": statuses,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
