"""Leave request records and request bodies."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Literal

from pydantic import Field, model_validator

from hr_console.models.base import CamelModel, HRRecord, PatchModel
from hr_console.models.employee import RequiredText

LEAVE_STATUSES = ("Pending", "Approved", "Rejected")

LeaveStatus = Literal["Pending", "Approved", "Rejected"]

DEFAULT_APPROVER = "HR Admin"


class LeaveRequest(HRRecord):
    employee_id: int = 0
    type: str = ""
    start_date: str = ""
    end_date: str = ""
    reason: str = ""
    status: str = "Pending"
    approved_by: str | None = None
    request_date: str | None = None
    days: int | None = None


class LeaveRequestCreate(CamelModel):
    employee_id: int = Field(..., gt=0)
    type: RequiredText
    start_date: date
    end_date: date
    reason: RequiredText

    @model_validator(mode="after")
    def _check_dates(self) -> LeaveRequestCreate:
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class LeaveRequestUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"approved_by"})

    type: RequiredText | None = None
    start_date: date | None = None
    end_date: date | None = None
    reason: RequiredText | None = None
    status: LeaveStatus | None = None
    approved_by: str | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> LeaveRequestUpdate:
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class LeaveDecision(CamelModel):
    approver: RequiredText = DEFAULT_APPROVER
