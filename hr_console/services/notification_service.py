"""Activity feed derived once from employee and leave data."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from datetime import datetime, timedelta

from hr_console.core.config import Settings
from hr_console.core.latency import OP_GET, OP_LIST, LatencyStrategy, NoDelay, latency_from_settings
from hr_console.models.employee import Employee
from hr_console.models.leave import LeaveRequest
from hr_console.models.notification import ActivityNotification
from hr_console.services.aggregator import parse_date
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service

logger = logging.getLogger(__name__)

NEW_HIRE_WINDOW_DAYS = 30
DEFAULT_LIMIT = 20


def generate_activities(
    employees: Sequence[Employee],
    leave_requests: Sequence[LeaveRequest],
    now: datetime,
    rng: random.Random,
    limit: int = DEFAULT_LIMIT,
) -> list[ActivityNotification]:
    """Synthesize the activity feed, newest first, capped at ``limit`` entries.

    Timestamps and read flags come from ``rng``; a seeded ``random.Random``
    makes the feed reproducible.
    """
    drafts: list[tuple[datetime, dict]] = []

    def add(kind: str, employee: Employee, description: str, timestamp: datetime, read: bool) -> None:
        drafts.append(
            (
                timestamp,
                {
                    "id": len(drafts) + 1,
                    "type": kind,
                    "employee_id": employee.id,
                    "employee_name": employee.full_name,
                    "employee_photo": employee.photo,
                    "description": description,
                    "timestamp": timestamp.isoformat(),
                    "read": read,
                },
            )
        )

    for employee in employees:
        joined = parse_date(employee.start_date)
        if joined is not None:
            join_time = datetime.combine(joined, datetime.min.time())
            if (now - join_time).days < NEW_HIRE_WINDOW_DAYS:
                add(
                    "employee_created",
                    employee,
                    f"joined the {employee.department} department as {employee.role}",
                    join_time + timedelta(days=rng.random()),
                    rng.random() > 0.3,
                )

        if rng.random() > 0.7:
            add(
                "employee_updated",
                employee,
                "updated their profile information",
                now - timedelta(days=rng.random() * 7),
                rng.random() > 0.4,
            )

    by_id = {e.id: e for e in employees}
    for leave in leave_requests:
        employee = by_id.get(leave.employee_id)
        if employee is None:
            continue

        leave_type = str(leave.type).lower()
        add(
            "leave_requested",
            employee,
            f"requested {leave_type} from {leave.start_date} to {leave.end_date}",
            now - timedelta(days=rng.random() * 14),
            rng.random() > 0.3,
        )

        if leave.status != "Pending":
            kind = "leave_approved" if leave.status == "Approved" else "leave_rejected"
            description = f"{leave_type} request was {str(leave.status).lower()}"
            if leave.approved_by:
                description += f" by {leave.approved_by}"
            add(kind, employee, description, now - timedelta(days=rng.random() * 10), rng.random() > 0.5)

    drafts.sort(key=lambda pair: pair[0], reverse=True)
    return [ActivityNotification.model_validate(data) for _, data in drafts[:limit]]


class NotificationService:
    def __init__(self, latency: LatencyStrategy | None = None) -> None:
        self.activities: list[ActivityNotification] = []
        self.latency: LatencyStrategy = latency or NoDelay()
        self.seed: int | None = None
        self.limit = DEFAULT_LIMIT
        self.initialized = False

    async def initialize(self, settings: Settings, now: datetime | None = None) -> None:
        if self.initialized:
            return

        self.latency = latency_from_settings(settings)
        self.seed = settings.NOTIFICATION_SEED
        self.limit = settings.NOTIFICATION_LIMIT
        self.reset(now)
        self.initialized = True
        logger.info("NotificationService initialized (activities=%d)", len(self.activities))

    async def close(self) -> None:
        self.activities = []
        self.latency = NoDelay()
        self.seed = None
        self.limit = DEFAULT_LIMIT
        self.initialized = False

    def reset(self, now: datetime | None = None) -> None:
        """Rebuild the feed from the current employee and leave stores.

        Read flags are discarded. The generator is reseeded, so a fixed seed
        over unchanged stores and the same ``now`` gives the same feed again.
        """
        self.load(
            employee_service.snapshot(),
            leave_service.snapshot(),
            now or datetime.now(),  # noqa: DTZ005
            random.Random(self.seed),
            self.limit,
        )

    def load(
        self,
        employees: Sequence[Employee],
        leave_requests: Sequence[LeaveRequest],
        now: datetime,
        rng: random.Random,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self.activities = generate_activities(employees, leave_requests, now, rng, limit)

    async def get_recent_activities(self) -> list[ActivityNotification]:
        await self.latency.wait(OP_LIST)
        return [a.model_copy() for a in self.activities]

    async def mark_as_read(self, activity_id: int) -> ActivityNotification | None:
        await self.latency.wait(OP_GET)
        for activity in self.activities:
            if activity.id == activity_id:
                activity.read = True
                return activity.model_copy()
        return None

    async def mark_all_as_read(self) -> bool:
        await self.latency.wait(OP_LIST)
        for activity in self.activities:
            activity.read = True
        return True

    def unread_count(self) -> int:
        return sum(1 for a in self.activities if not a.read)


notification_service = NotificationService()
