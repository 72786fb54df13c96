"""Dashboard and report projections over employee, department and leave snapshots.

Everything here is a pure function of its arguments. ``now`` is always passed
in so the same snapshot and the same ``now`` give the same result.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from hr_console.models.dashboard import (
    DashboardSummary,
    DepartmentStat,
    LeaveTotals,
    MonthBucket,
    ReportSummary,
)
from hr_console.models.department import Department
from hr_console.models.employee import EMPLOYEE_STATUSES, Employee
from hr_console.models.leave import LEAVE_STATUSES, LeaveRequest

DASHBOARD_HIRE_WINDOW_DAYS = 30
REPORT_HIRE_WINDOW_DAYS = 90
DASHBOARD_LIST_LIMIT = 5
UPCOMING_LEAVE_DAYS = 7
LEAVE_TREND_MONTHS = 6

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ")


def parse_date(value: object) -> date | None:
    if not value or not isinstance(value, str):
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue
    return None


def _today(now: date | datetime) -> date:
    return now.date() if isinstance(now, datetime) else now


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part / whole * 100, 1)


def department_headcount(employees: Sequence[Employee], department_name: str) -> int:
    return sum(1 for e in employees if e.department == department_name)


def department_stats(departments: Sequence[Department], employees: Sequence[Employee]) -> list[DepartmentStat]:
    stats: list[DepartmentStat] = []
    for department in departments:
        members = [e for e in employees if e.department == department.name]
        active = sum(1 for e in members if e.status == "Active")
        stats.append(
            DepartmentStat(
                name=department.name,
                count=len(members),
                active=active,
                on_leave=sum(1 for e in members if e.status == "On Leave"),
                active_percentage=_percentage(active, len(members)),
            )
        )
    return stats


def status_breakdown(employees: Sequence[Employee], include_known: bool = False) -> dict[str, int]:
    """Employee count per status value.

    With ``include_known`` the three standard statuses are always present
    (zero when unused) and come first.
    """
    counts = Counter(e.status for e in employees)
    if not include_known:
        return dict(counts)

    result = {status: counts.get(status, 0) for status in EMPLOYEE_STATUSES}
    for status, count in counts.items():
        result.setdefault(status, count)
    return result


def recent_hires(
    employees: Sequence[Employee],
    now: date | datetime,
    days: int = DASHBOARD_HIRE_WINDOW_DAYS,
    limit: int | None = None,
) -> list[Employee]:
    today = _today(now)
    cutoff = today - timedelta(days=days)

    dated = [(start, e) for e in employees if (start := parse_date(e.start_date)) and cutoff <= start <= today]
    dated.sort(key=lambda pair: pair[0], reverse=True)

    hires = [e for _, e in dated]
    return hires[:limit] if limit is not None else hires


def upcoming_leave(
    leave_requests: Sequence[LeaveRequest],
    now: date | datetime,
    days: int = UPCOMING_LEAVE_DAYS,
    limit: int | None = None,
) -> list[LeaveRequest]:
    today = _today(now)
    horizon = today + timedelta(days=days)

    dated = [
        (start, r)
        for r in leave_requests
        if r.status == "Approved" and (start := parse_date(r.start_date)) and today <= start <= horizon
    ]
    dated.sort(key=lambda pair: pair[0])

    upcoming = [r for _, r in dated]
    return upcoming[:limit] if limit is not None else upcoming


def _trailing_months(today: date, months: int) -> list[tuple[int, int]]:
    result: list[tuple[int, int]] = []
    for offset in range(months - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - offset
        result.append((index // 12, index % 12 + 1))
    return result


def leave_trend(
    leave_requests: Sequence[LeaveRequest],
    now: date | datetime,
    months: int = LEAVE_TREND_MONTHS,
) -> list[MonthBucket]:
    """Leave requests per calendar month by start date, oldest month first."""
    counts = Counter(
        (start.year, start.month) for r in leave_requests if (start := parse_date(r.start_date)) is not None
    )
    return [
        MonthBucket(
            label=date(year, month, 1).strftime("%b %Y"),
            year=year,
            month=month,
            count=counts.get((year, month), 0),
        )
        for year, month in _trailing_months(_today(now), months)
    ]


def leave_totals(leave_requests: Sequence[LeaveRequest]) -> LeaveTotals:
    counts = Counter(r.status for r in leave_requests)
    by_status = {status: counts.get(status, 0) for status in LEAVE_STATUSES}
    for status, count in counts.items():
        by_status.setdefault(status, count)

    return LeaveTotals(
        total=len(leave_requests),
        pending=counts.get("Pending", 0),
        approved=counts.get("Approved", 0),
        rejected=counts.get("Rejected", 0),
        by_status=by_status,
    )


def dashboard_summary(
    employees: Sequence[Employee],
    departments: Sequence[Department],
    leave_requests: Sequence[LeaveRequest],
    now: date | datetime,
) -> DashboardSummary:
    active = sum(1 for e in employees if e.status == "Active")
    return DashboardSummary(
        total_employees=len(employees),
        active_employees=active,
        on_leave_employees=sum(1 for e in employees if e.status == "On Leave"),
        pending_leave_requests=sum(1 for r in leave_requests if r.status == "Pending"),
        active_percentage=_percentage(active, len(employees)),
        recent_hires=recent_hires(employees, now, DASHBOARD_HIRE_WINDOW_DAYS, DASHBOARD_LIST_LIMIT),
        upcoming_leave=upcoming_leave(leave_requests, now, UPCOMING_LEAVE_DAYS, DASHBOARD_LIST_LIMIT),
        departments=department_stats(departments, employees),
    )


def report_summary(
    employees: Sequence[Employee],
    departments: Sequence[Department],
    leave_requests: Sequence[LeaveRequest],
    now: date | datetime,
) -> ReportSummary:
    average_team_size = round(len(employees) / len(departments)) if departments else 0
    return ReportSummary(
        total_employees=len(employees),
        recent_hire_count=len(recent_hires(employees, now, REPORT_HIRE_WINDOW_DAYS)),
        average_team_size=average_team_size,
        status_counts=status_breakdown(employees, include_known=True),
        departments=department_stats(departments, employees),
        leave_trend=leave_trend(leave_requests, now),
        leave_totals=leave_totals(leave_requests),
    )
