from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_console.api.v1.router import api_router
from hr_console.core.config import settings
from hr_console.services.department_service import department_service
from hr_console.services.employee_service import employee_service
from hr_console.services.leave_service import leave_service
from hr_console.services.notification_service import notification_service
from hr_console.services.performance_service import performance_service

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

_DATA_SERVICES = (employee_service, department_service, leave_service, performance_service)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    for service in _DATA_SERVICES:
        try:
            await service.initialize(settings)
        except Exception:
            logger.exception("Failed to initialize %s service — continuing with an empty store", service.entity_name)
    # Activity feed reads the employee and leave stores.
    try:
        await notification_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize NotificationService — continuing without activity feed")
    yield
    for service in _DATA_SERVICES:
        await service.close()
    await notification_service.close()


app = FastAPI(
    title="HR Console API",
    description="Employees, departments, leave, performance reviews and dashboards",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "HR Console API"}
