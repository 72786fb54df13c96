from __future__ import annotations

from collections.abc import Sequence

from hr_console.core.latency import OP_QUERY
from hr_console.models.employee import Employee
from hr_console.models.performance import PerformanceReview
from hr_console.services.crud import CrudService


class PerformanceService(CrudService[PerformanceReview]):
    record_type = PerformanceReview
    entity_name = "Performance review"
    seed_file = "performance_reviews.json"

    async def get_by_employee_id(self, employee_id: int) -> list[PerformanceReview]:
        await self.latency.wait(OP_QUERY)
        return [r for r in self.store.snapshot() if r.employee_id == employee_id]

    async def search(
        self,
        term: str = "",
        period: str | None = None,
        employees: Sequence[Employee] = (),
    ) -> list[PerformanceReview]:
        """Match ``term`` against the review period or the reviewed employee's name."""
        await self.latency.wait(OP_QUERY)

        names = {e.id: e.full_name.lower() for e in employees}
        needle = term.strip().lower()

        results: list[PerformanceReview] = []
        for review in self.store.snapshot():
            review_period = str(review.review_period)
            if needle and needle not in names.get(review.employee_id, "") and needle not in review_period.lower():
                continue
            if period and period != "all" and period not in review_period:
                continue
            results.append(review)
        return results


performance_service = PerformanceService()
