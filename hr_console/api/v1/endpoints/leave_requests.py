from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from hr_console.models.leave import LeaveDecision, LeaveRequest, LeaveRequestCreate, LeaveRequestUpdate
from hr_console.services.aggregator import parse_date
from hr_console.services.crud import RecordNotFoundError
from hr_console.services.leave_service import calculate_days, leave_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leave-requests", tags=["leave-requests"])


@router.get("", response_model=list[LeaveRequest])
async def list_leave_requests(
    status_filter: str | None = Query(None, alias="status"),  # noqa: B008
):
    try:
        if status_filter:
            return await leave_service.get_by_status(status_filter)
        return await leave_service.list_all()
    except Exception as err:
        logger.exception("Failed to list leave requests")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load leave requests",
        ) from err


@router.get("/{request_id}", response_model=LeaveRequest)
async def get_leave_request(request_id: int):
    leave = await leave_service.get_by_id(request_id)
    if not leave:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Leave request {request_id} not found",
        )
    return leave


@router.post("", response_model=LeaveRequest, status_code=status.HTTP_201_CREATED)
async def create_leave_request(request: LeaveRequestCreate):
    fields = request.model_dump(mode="json")
    fields["request_date"] = date.today().isoformat()
    fields["days"] = calculate_days(request.start_date, request.end_date)

    try:
        created = await leave_service.create(fields)
    except Exception as err:
        logger.exception("Failed to submit leave request for employee %s", request.employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit leave request",
        ) from err

    logger.info("Leave request %d submitted for employee %d (%d days)", created.id, created.employee_id, fields["days"])
    return created


@router.put("/{request_id}", response_model=LeaveRequest)
async def update_leave_request(request_id: int, request: LeaveRequestUpdate):
    changes = request.changes()
    if request.start_date or request.end_date:
        existing = await leave_service.get_by_id(request_id)
        if not existing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Leave request {request_id} not found",
            )
        # A single changed date is checked against the stored other one.
        start = request.start_date or parse_date(existing.start_date)
        end = request.end_date or parse_date(existing.end_date)
        if start and end:
            if end < start:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail="End date must be after start date",
                )
            changes["days"] = calculate_days(start, end)

    try:
        return await leave_service.update(request_id, changes)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.post("/{request_id}/approve", response_model=LeaveRequest)
async def approve_leave_request(request_id: int, decision: LeaveDecision | None = None):
    approver = decision.approver if decision else LeaveDecision().approver
    try:
        return await leave_service.approve(request_id, approver)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.post("/{request_id}/reject", response_model=LeaveRequest)
async def reject_leave_request(request_id: int, decision: LeaveDecision | None = None):
    approver = decision.approver if decision else LeaveDecision().approver
    try:
        return await leave_service.reject(request_id, approver)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.delete("/{request_id}")
async def delete_leave_request(request_id: int):
    try:
        await leave_service.delete(request_id)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return {"success": True}
