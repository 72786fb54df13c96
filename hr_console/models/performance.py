"""Performance review records and request bodies."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from hr_console.models.base import CamelModel, HRRecord, PatchModel
from hr_console.models.employee import RequiredText

Rating = Annotated[int, Field(ge=0, le=5)]


class PerformanceReview(HRRecord):
    employee_id: int = 0
    review_period: str = ""
    overall_rating: int = 0
    technical_skills: int = 0
    communication: int = 0
    leadership: int = 0
    teamwork: int = 0
    problem_solving: int = 0
    goals: str = ""
    achievements: str = ""
    areas_for_improvement: str = ""
    feedback: str = ""
    reviewer_name: str = ""
    review_date: str = ""


class PerformanceReviewCreate(CamelModel):
    employee_id: int = Field(..., gt=0)
    review_period: RequiredText
    overall_rating: int = Field(..., ge=1, le=5)
    technical_skills: Rating = 0
    communication: Rating = 0
    leadership: Rating = 0
    teamwork: Rating = 0
    problem_solving: Rating = 0
    goals: str = ""
    achievements: str = ""
    areas_for_improvement: str = ""
    feedback: str = ""
    reviewer_name: str = ""


class PerformanceReviewUpdate(PatchModel):
    employee_id: int | None = Field(default=None, gt=0)
    review_period: RequiredText | None = None
    overall_rating: int | None = Field(default=None, ge=1, le=5)
    technical_skills: Rating | None = None
    communication: Rating | None = None
    leadership: Rating | None = None
    teamwork: Rating | None = None
    problem_solving: Rating | None = None
    goals: str | None = None
    achievements: str | None = None
    areas_for_improvement: str | None = None
    feedback: str | None = None
    reviewer_name: str | None = None
