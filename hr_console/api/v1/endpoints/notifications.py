from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from hr_console.models.notification import ActivityNotification
from hr_console.services.notification_service import notification_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[ActivityNotification])
async def list_activities():
    return await notification_service.get_recent_activities()


@router.get("/unread-count")
async def unread_count():
    return {"count": notification_service.unread_count()}


@router.post("/{activity_id}/read", response_model=ActivityNotification)
async def mark_as_read(activity_id: int):
    activity = await notification_service.mark_as_read(activity_id)
    if activity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Activity {activity_id} not found",
        )
    return activity


@router.post("/read-all")
async def mark_all_as_read():
    await notification_service.mark_all_as_read()
    return {"success": True, "unread": notification_service.unread_count()}
