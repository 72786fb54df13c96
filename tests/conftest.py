from __future__ import annotations

from datetime import date

import pytest
from starlette.testclient import TestClient

from hr_console.main import app
from hr_console.services.department_service import DepartmentService
from hr_console.services.employee_service import EmployeeService
from hr_console.services.leave_service import LeaveService
from hr_console.services.performance_service import PerformanceService

# Fixed "today" for the bundled seed data in hr_console/data.
SEED_TODAY = date(2026, 10, 18)

SAMPLE_EMPLOYEES = [
    {
        "Id": 1,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-0001",
        "role": "Staff Engineer",
        "department": "Engineering",
        "managerId": None,
        "startDate": "2024-01-15",
        "status": "Active",
    },
    {
        "Id": 2,
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace@example.com",
        "phone": "555-0002",
        "role": "Compiler Engineer",
        "department": "Engineering",
        "managerId": 1,
        "startDate": "2024-05-01",
        "status": "On Leave",
    },
    {
        "Id": 5,
        "firstName": "Alan",
        "lastName": "Turing",
        "email": "alan@example.com",
        "phone": "555-0005",
        "role": "Researcher",
        "department": "Research",
        "managerId": None,
        "startDate": "2024-06-10",
        "status": "Inactive",
    },
]

SAMPLE_DEPARTMENTS = [
    {"Id": 1, "name": "Engineering", "managerId": 1},
    {"Id": 2, "name": "Research", "managerId": 5},
    {"Id": 3, "name": "Legal", "managerId": None},
]

SAMPLE_LEAVE_REQUESTS = [
    {
        "Id": 1,
        "employeeId": 1,
        "type": "Annual Leave",
        "startDate": "2024-06-20",
        "endDate": "2024-06-24",
        "reason": "Holiday",
        "status": "Approved",
        "approvedBy": "HR Admin",
    },
    {
        "Id": 2,
        "employeeId": 2,
        "type": "Sick Leave",
        "startDate": "2024-06-12",
        "endDate": "2024-06-13",
        "reason": "Flu",
        "status": "Pending",
    },
    {
        "Id": 3,
        "employeeId": 5,
        "type": "Personal Leave",
        "startDate": "2024-03-04",
        "endDate": "2024-03-04",
        "reason": "Errand",
        "status": "Rejected",
        "approvedBy": "HR Admin",
    },
]

SAMPLE_REVIEWS = [
    {
        "Id": 1,
        "employeeId": 1,
        "reviewPeriod": "Q1 2024",
        "overallRating": 5,
        "technicalSkills": 5,
        "communication": 4,
        "leadership": 4,
        "teamwork": 5,
        "problemSolving": 5,
        "reviewerName": "HR Admin",
        "reviewDate": "2024-04-02",
    },
    {
        "Id": 2,
        "employeeId": 2,
        "reviewPeriod": "Annual 2023",
        "overallRating": 4,
        "reviewerName": "Ada Lovelace",
        "reviewDate": "2024-01-20",
    },
]


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def employee_svc() -> EmployeeService:
    service = EmployeeService()
    service.seed(SAMPLE_EMPLOYEES)
    return service


@pytest.fixture
def department_svc() -> DepartmentService:
    service = DepartmentService()
    service.seed(SAMPLE_DEPARTMENTS)
    return service


@pytest.fixture
def leave_svc() -> LeaveService:
    service = LeaveService()
    service.seed(SAMPLE_LEAVE_REQUESTS)
    return service


@pytest.fixture
def performance_svc() -> PerformanceService:
    service = PerformanceService()
    service.seed(SAMPLE_REVIEWS)
    return service
