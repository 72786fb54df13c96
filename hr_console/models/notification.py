from __future__ import annotations

from typing import Literal

from hr_console.models.base import HRRecord

ActivityType = Literal[
    "employee_created",
    "employee_updated",
    "leave_requested",
    "leave_approved",
    "leave_rejected",
]


class ActivityNotification(HRRecord):
    """Synthetic activity-feed entry derived from employee and leave data."""

    type: ActivityType
    employee_id: int
    employee_name: str = ""
    employee_photo: str | None = None
    description: str = ""
    timestamp: str
    read: bool = False
