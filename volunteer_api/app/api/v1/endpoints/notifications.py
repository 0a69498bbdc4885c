"""
Notification endpoints for API v1.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_api.app.core.deps import get_store
from volunteer_api.app.core.errors import NotFoundError
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.notification import Notification, NotificationCreate
from volunteer_api.app.services.notification_service import NotificationService


router = APIRouter()


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification: NotificationCreate,
    store: RecordStore = Depends(get_store),
) -> Dict[str, str]:
    await NotificationService.create_notification(store, notification)
    return {"message": "Notification created successfully."}


@router.get("/{email}", response_model=List[Notification])
async def list_notifications(email: str, store: RecordStore = Depends(get_store)) -> List[Notification]:
    """List notifications addressed to ``email``, oldest first."""
    return await NotificationService.list_notifications(store, email)


@router.delete("/{email}/{message:path}")
async def delete_notification(
    email: str,
    message: str,
    store: RecordStore = Depends(get_store),
) -> Dict[str, str]:
    """Delete one notification with exactly this email and message.

    When several notifications share the pair, only the oldest one is
    removed.
    """
    try:
        await NotificationService.delete_notification(store, email, message)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return {"message": "Notification deleted successfully."}
