from __future__ import annotations

from hr_console.core.config import Settings
from hr_console.core.latency import LatencyStrategy, latency_from_settings
from hr_console.models.department import Department
from hr_console.services.crud import CrudService


class DepartmentService(CrudService[Department]):
    record_type = Department
    entity_name = "Department"
    seed_file = "departments.json"

    def _latency_from_settings(self, settings: Settings) -> LatencyStrategy:
        return latency_from_settings(settings, list_ms=settings.LATENCY_DEPARTMENT_LIST_MS)


department_service = DepartmentService()
