"""
Pydantic models for notifications.
"""

from pydantic import BaseModel, Field

from .common import Email


class NotificationCreate(BaseModel):
    """Schema for creating a notification explicitly."""

    email: Email = Field(..., examples=["volunteer@example.com"])
    message: str = Field(..., min_length=1, examples=["Shift starts at 9am"])


class Notification(BaseModel):
    """A stored notification.

    ``sequence`` is assigned by the record store on insertion and is not
    part of the JSON representation.
    """

    email: str
    message: str
    sequence: int = Field(0, exclude=True)
