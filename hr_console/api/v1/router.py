from fastapi import APIRouter

from hr_console.api.v1.endpoints import (
    admin,
    dashboard,
    departments,
    employees,
    health,
    leave_requests,
    notifications,
    performance_reviews,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(departments.router)
api_router.include_router(leave_requests.router)
api_router.include_router(performance_reviews.router)
api_router.include_router(notifications.router)
api_router.include_router(dashboard.router)
api_router.include_router(admin.router)
