"""In-memory leave request service."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from hr_console.core.latency import OP_QUERY
from hr_console.models.leave import DEFAULT_APPROVER, LeaveRequest
from hr_console.services.crud import CrudService

logger = logging.getLogger(__name__)


def calculate_days(start: date, end: date) -> int:
    """Inclusive number of calendar days covered by a leave request."""
    return (end - start).days + 1


class LeaveService(CrudService[LeaveRequest]):
    record_type = LeaveRequest
    entity_name = "Leave request"
    seed_file = "leave_requests.json"

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        # New requests always start pending, whatever the caller sent.
        data["status"] = "Pending"
        data.pop("approved_by", None)
        return data

    async def get_by_employee_id(self, employee_id: int) -> list[LeaveRequest]:
        await self.latency.wait(OP_QUERY)
        return [r for r in self.store.snapshot() if r.employee_id == employee_id]

    async def get_by_status(self, status: str) -> list[LeaveRequest]:
        await self.latency.wait(OP_QUERY)
        return [r for r in self.store.snapshot() if r.status == status]

    async def approve(self, request_id: int, approver: str = DEFAULT_APPROVER) -> LeaveRequest:
        return await self._decide(request_id, "Approved", approver)

    async def reject(self, request_id: int, approver: str = DEFAULT_APPROVER) -> LeaveRequest:
        return await self._decide(request_id, "Rejected", approver)

    async def _decide(self, request_id: int, status: str, approver: str) -> LeaveRequest:
        updated = await self.update(request_id, {"status": status, "approved_by": approver})
        logger.info("Leave request id=%d %s by %s", request_id, status.lower(), approver)
        return updated


leave_service = LeaveService()
