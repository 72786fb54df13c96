"""In-memory employee service."""

from __future__ import annotations

import logging
from typing import Any

from hr_console.core.latency import OP_QUERY
from hr_console.models.employee import Employee
from hr_console.services.crud import CrudService

logger = logging.getLogger(__name__)


def _matches_term(employee: Employee, term: str) -> bool:
    needle = term.lower()
    haystacks = (employee.full_name, employee.email, employee.role, employee.department)
    return any(needle in str(value).lower() for value in haystacks)


class EmployeeService(CrudService[Employee]):
    record_type = Employee
    entity_name = "Employee"
    seed_file = "employees.json"

    async def search(self, term: str = "", **filters: Any) -> list[Employee]:
        """Free-text search over name, email, role and department plus exact-match filters.

        Empty filter values are ignored, so ``search(department="")`` returns everyone.
        """
        await self.latency.wait(OP_QUERY)

        results = self.store.snapshot()
        term = term.strip()
        if term:
            results = [e for e in results if _matches_term(e, term)]

        for key, value in filters.items():
            if value in (None, ""):
                continue
            results = [e for e in results if getattr(e, key, None) == value]

        logger.debug("Employee search term=%r filters=%s -> %d", term, filters, len(results))
        return results


employee_service = EmployeeService()
