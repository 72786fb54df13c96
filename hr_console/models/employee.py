"""Employee records and the request bodies that create or edit them."""

from __future__ import annotations

from datetime import date
from typing import Annotated, ClassVar, Literal

from pydantic import Field, StringConstraints

from hr_console.models.base import CamelModel, HRRecord, PatchModel

EMPLOYEE_STATUSES = ("Active", "Inactive", "On Leave")

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
EmployeeStatus = Literal["Active", "Inactive", "On Leave"]

EMAIL_PATTERN = r"\S+@\S+\.\S+"


class Employee(HRRecord):
    """Employee as held in memory. ``department`` is a department name, not an id."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""
    department: str = ""
    manager_id: int | None = None
    start_date: str = ""
    status: str = "Active"
    photo: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class EmployeeCreate(CamelModel):
    first_name: RequiredText
    last_name: RequiredText
    email: Annotated[RequiredText, Field(pattern=EMAIL_PATTERN)]
    phone: RequiredText
    role: RequiredText
    department: RequiredText
    manager_id: int | None = None
    start_date: date
    status: EmployeeStatus = "Active"
    photo: str | None = None


class EmployeeUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"manager_id", "photo"})

    first_name: RequiredText | None = None
    last_name: RequiredText | None = None
    email: Annotated[RequiredText, Field(pattern=EMAIL_PATTERN)] | None = None
    phone: RequiredText | None = None
    role: RequiredText | None = None
    department: RequiredText | None = None
    manager_id: int | None = None
    start_date: date | None = None
    status: EmployeeStatus | None = None
    photo: str | None = None
