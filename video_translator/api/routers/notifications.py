"""
Notification API endpoints.

Routes: GET /notifications, POST /notifications/{id}/read, DELETE /notifications

Dependencies: video_translator.application.services
System role: Notification center HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from video_translator.api.deps import get_job_service
from video_translator.application.services import JobService
from video_translator.models.notification import NotificationListResponse

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    job_service: JobService = Depends(get_job_service),
) -> NotificationListResponse:
    """Notifications newest first, with the unread count."""
    return job_service.list_notifications()


@router.post("/{notification_id}/read")
async def mark_notification_read(
    notification_id: UUID,
    job_service: JobService = Depends(get_job_service),
) -> dict:
    """
    Raises:
        HTTPException(404): Notification not found
    """
    if not job_service.mark_notification_read(notification_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return {"id": str(notification_id), "read": True}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notifications(job_service: JobService = Depends(get_job_service)) -> None:
    job_service.clear_notifications()
