from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, status

from hr_console.models.performance import PerformanceReview, PerformanceReviewCreate, PerformanceReviewUpdate
from hr_console.services.crud import RecordNotFoundError
from hr_console.services.employee_service import employee_service
from hr_console.services.performance_service import performance_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/performance-reviews", tags=["performance-reviews"])


@router.get("", response_model=list[PerformanceReview])
async def list_reviews(q: str = "", period: str | None = None):
    try:
        if q or period:
            employees = await employee_service.list_all()
            return await performance_service.search(q, period, employees)
        return await performance_service.list_all()
    except Exception as err:
        logger.exception("Failed to list performance reviews")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load performance reviews",
        ) from err


@router.get("/{review_id}", response_model=PerformanceReview)
async def get_review(review_id: int):
    review = await performance_service.get_by_id(review_id)
    if not review:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Performance review {review_id} not found",
        )
    return review


@router.post("", response_model=PerformanceReview, status_code=status.HTTP_201_CREATED)
async def create_review(request: PerformanceReviewCreate):
    fields = request.model_dump(mode="json")
    fields["review_date"] = date.today().isoformat()
    return await performance_service.create(fields)


@router.put("/{review_id}", response_model=PerformanceReview)
async def update_review(review_id: int, request: PerformanceReviewUpdate):
    changes = request.changes()
    changes["review_date"] = date.today().isoformat()
    try:
        return await performance_service.update(review_id, changes)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.delete("/{review_id}")
async def delete_review(review_id: int):
    try:
        await performance_service.delete(review_id)
    except RecordNotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    return {"success": True}
