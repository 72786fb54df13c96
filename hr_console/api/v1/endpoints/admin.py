from __future__ import annotations

import logging

from fastapi import APIRouter

from hr_console.services.department_service import department_service
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service
from hr_console.services.notification_service import notification_service
from hr_console.services.performance_service import performance_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reset")
async def reset_data():
    """Restore every store to its seed data and regenerate the activity feed."""
    for service in (employee_service, department_service, leave_service, performance_service):
        service.reset()
    # Feed is derived from the restored employee and leave stores.
    notification_service.reset()
    logger.info("Stores reset to seed data (activities=%d)", len(notification_service.activities))
    return {"success": True}
