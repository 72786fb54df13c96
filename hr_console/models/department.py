from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from hr_console.models.base import CamelModel, HRRecord, PatchModel
from hr_console.models.employee import RequiredText


class Department(HRRecord):
    name: str = ""
    manager_id: int | None = None
    description: str | None = None


class DepartmentCreate(CamelModel):
    name: RequiredText
    manager_id: int | None = Field(default=None, gt=0)
    description: str | None = None


class DepartmentUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"manager_id", "description"})

    name: RequiredText | None = None
    manager_id: int | None = Field(default=None, gt=0)
    description: str | None = None
