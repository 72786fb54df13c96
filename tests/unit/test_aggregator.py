from __future__ import annotations

from datetime import date, datetime

import pytest

from hr_console.models.department import Department
from hr_console.models.employee import Employee
from hr_console.models.leave import LeaveRequest
from hr_console.services import aggregator

NOW = date(2024, 6, 15)


@pytest.fixture
def employees(employee_svc):
    return employee_svc.snapshot()


@pytest.fixture
def departments(department_svc):
    return department_svc.snapshot()


@pytest.fixture
def leave_requests(leave_svc):
    return leave_svc.snapshot()


class TestHeadcountAndStatus:
    def test_headcount_scenario(self):
        employees = [
            Employee(id=1, department="Engineering", status="Active"),
            Employee(id=2, department="Engineering", status="On Leave"),
        ]

        assert aggregator.department_headcount(employees, "Engineering") == 2
        assert aggregator.status_breakdown(employees) == {"Active": 1, "On Leave": 1}

    def test_headcount_is_case_sensitive(self, employees):
        assert aggregator.department_headcount(employees, "engineering") == 0
        assert aggregator.department_headcount(employees, "Research") == 1

    def test_status_breakdown_with_known_statuses(self):
        employees = [Employee(id=1, status="Active"), Employee(id=2, status="Sabbatical")]

        result = aggregator.status_breakdown(employees, include_known=True)

        assert list(result) == ["Active", "Inactive", "On Leave", "Sabbatical"]
        assert result == {"Active": 1, "Inactive": 0, "On Leave": 0, "Sabbatical": 1}

    def test_department_stats(self, departments, employees):
        stats = {s.name: s for s in aggregator.department_stats(departments, employees)}

        assert stats["Engineering"].count == 2
        assert stats["Engineering"].active == 1
        assert stats["Engineering"].on_leave == 1
        assert stats["Engineering"].active_percentage == 50.0
        assert stats["Research"].active_percentage == 0.0
        assert stats["Legal"].count == 0
        assert stats["Legal"].active_percentage == 0.0


class TestRecentHires:
    def test_thirty_day_window(self, employees):
        assert [e.id for e in aggregator.recent_hires(employees, NOW, days=30)] == [5]

    def test_ninety_day_window_sorted_newest_first(self, employees):
        assert [e.id for e in aggregator.recent_hires(employees, NOW, days=90)] == [5, 2]

    def test_limit(self, employees):
        assert [e.id for e in aggregator.recent_hires(employees, NOW, days=365, limit=2)] == [5, 2]

    def test_accepts_datetime_now(self, employees):
        result = aggregator.recent_hires(employees, datetime(2024, 6, 15, 23, 59), days=30)
        assert [e.id for e in result] == [5]

    def test_future_and_unparsable_dates_are_skipped(self):
        employees = [
            Employee(id=1, start_date="2024-07-01"),
            Employee(id=2, start_date="not-a-date"),
            Employee(id=3, start_date=""),
            Employee(id=4, start_date="2024-06-15"),
        ]
        assert [e.id for e in aggregator.recent_hires(employees, NOW)] == [4]


class TestUpcomingLeave:
    def test_only_approved_within_a_week(self, leave_requests):
        assert [r.id for r in aggregator.upcoming_leave(leave_requests, NOW)] == [1]

    def test_window_bounds_are_inclusive(self):
        requests = [
            LeaveRequest(id=1, status="Approved", start_date="2024-06-15"),
            LeaveRequest(id=2, status="Approved", start_date="2024-06-22"),
            LeaveRequest(id=3, status="Approved", start_date="2024-06-23"),
            LeaveRequest(id=4, status="Approved", start_date="2024-06-14"),
        ]
        assert [r.id for r in aggregator.upcoming_leave(requests, NOW)] == [1, 2]

    def test_sorted_by_start_date(self):
        requests = [
            LeaveRequest(id=1, status="Approved", start_date="2024-06-20"),
            LeaveRequest(id=2, status="Approved", start_date="2024-06-16"),
        ]
        assert [r.id for r in aggregator.upcoming_leave(requests, NOW)] == [2, 1]


class TestLeaveTrend:
    def test_six_month_buckets_oldest_first(self, leave_requests):
        buckets = aggregator.leave_trend(leave_requests, NOW)

        assert [b.label for b in buckets] == [
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
            "Apr 2024",
            "May 2024",
            "Jun 2024",
        ]
        assert [b.count for b in buckets] == [0, 0, 1, 0, 0, 2]

    def test_crosses_year_boundary(self):
        requests = [
            LeaveRequest(id=1, start_date="2023-09-30"),
            LeaveRequest(id=2, start_date="2023-08-31"),
            LeaveRequest(id=3, start_date="2024-02-01"),
        ]
        buckets = aggregator.leave_trend(requests, date(2024, 2, 10))

        assert [(b.year, b.month) for b in buckets] == [
            (2023, 9),
            (2023, 10),
            (2023, 11),
            (2023, 12),
            (2024, 1),
            (2024, 2),
        ]
        assert [b.count for b in buckets] == [1, 0, 0, 0, 0, 1]


def test_leave_totals(leave_requests):
    totals = aggregator.leave_totals(leave_requests)

    assert totals.total == 3
    assert (totals.pending, totals.approved, totals.rejected) == (1, 1, 1)
    assert totals.by_status == {"Pending": 1, "Approved": 1, "Rejected": 1}


def test_leave_totals_keeps_unknown_statuses():
    totals = aggregator.leave_totals([LeaveRequest(id=1, status="Cancelled")])

    assert totals.total == 1
    assert totals.by_status["Cancelled"] == 1
    assert totals.pending == 0


def test_dashboard_summary(employees, departments, leave_requests):
    summary = aggregator.dashboard_summary(employees, departments, leave_requests, NOW)

    assert summary.total_employees == 3
    assert summary.active_employees == 1
    assert summary.on_leave_employees == 1
    assert summary.pending_leave_requests == 1
    assert summary.active_percentage == 33.3
    assert [e.id for e in summary.recent_hires] == [5]
    assert [r.id for r in summary.upcoming_leave] == [1]
    assert len(summary.departments) == 3


def test_report_summary(employees, departments, leave_requests):
    report = aggregator.report_summary(employees, departments, leave_requests, NOW)

    assert report.total_employees == 3
    assert report.recent_hire_count == 2
    assert report.average_team_size == 1
    assert report.status_counts == {"Active": 1, "Inactive": 1, "On Leave": 1}
    assert report.leave_totals.total == 3
    assert len(report.leave_trend) == 6


def test_summaries_handle_empty_snapshots():
    summary = aggregator.dashboard_summary([], [], [], NOW)
    report = aggregator.report_summary([], [], [], NOW)

    assert summary.active_percentage == 0.0
    assert report.average_team_size == 0
    assert report.leave_totals.total == 0


def test_aggregation_is_deterministic(employees, departments, leave_requests):
    first = aggregator.report_summary(employees, departments, leave_requests, NOW)
    second = aggregator.report_summary(employees, departments, leave_requests, NOW)
    assert first == second


def test_parse_date_formats():
    assert aggregator.parse_date("2024-06-15") == date(2024, 6, 15)
    assert aggregator.parse_date("2024-06-15T08:30:00") == date(2024, 6, 15)
    assert aggregator.parse_date("2024-06-15T08:30:00.123Z") == date(2024, 6, 15)
    assert aggregator.parse_date("15/06/2024") is None
    assert aggregator.parse_date(None) is None
    assert aggregator.parse_date(20240615) is None


def test_department_reference_is_by_name():
    departments = [Department(id=1, name="Ops")]
    employees = [Employee(id=1, department="Ops"), Employee(id=2, department="ops")]

    assert aggregator.department_stats(departments, employees)[0].count == 1
