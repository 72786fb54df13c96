"""Read-only projections served by the dashboard and report views."""

from __future__ import annotations

from hr_console.models.base import CamelModel
from hr_console.models.employee import Employee
from hr_console.models.leave import LeaveRequest


class DepartmentStat(CamelModel):
    name: str
    count: int
    active: int
    on_leave: int
    active_percentage: float


class MonthBucket(CamelModel):
    label: str
    year: int
    month: int
    count: int


class LeaveTotals(CamelModel):
    total: int
    pending: int
    approved: int
    rejected: int
    by_status: dict[str, int]


class DashboardSummary(CamelModel):
    total_employees: int
    active_employees: int
    on_leave_employees: int
    pending_leave_requests: int
    active_percentage: float
    recent_hires: list[Employee]
    upcoming_leave: list[LeaveRequest]
    departments: list[DepartmentStat]


class ReportSummary(CamelModel):
    total_employees: int
    recent_hire_count: int
    average_team_size: int
    status_counts: dict[str, int]
    departments: list[DepartmentStat]
    leave_trend: list[MonthBucket]
    leave_totals: LeaveTotals
