"""
Pydantic models for user data.

Defines schemas for registering and authenticating users, the volunteer
profile, volunteer history entries and the stored ``User`` record.
Passwords are kept in plain text; the API never returns them.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.config import settings
from .common import Email


class Credentials(BaseModel):
    """Body of the register and login requests."""

    email: Email = Field(..., examples=["volunteer@example.com"])
    password: str = Field(..., examples=["password123"])

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        if len(value) < settings.min_password_length:
            raise ValueError(
                f"Password must be at least {settings.min_password_length} characters long."
            )
        return value


class Profile(BaseModel):
    """Volunteer profile.

    Skills and availability drive event matching.  Availability entries
    use the ``"YYYY-MM-DD to YYYY-MM-DD"`` format; entries that do not
    parse are kept but never match anything.
    """

    full_name: str = Field(..., alias="fullName", max_length=50, examples=["Jane Doe"])
    address1: str = Field(..., max_length=100, examples=["123 Main St"])
    address2: Optional[str] = Field(None, max_length=100)
    city: str = Field(..., max_length=100, examples=["Anytown"])
    state: str = Field(..., pattern=r"^[A-Za-z]{2}$", examples=["CA"])
    zip: str = Field(..., min_length=5, max_length=9, examples=["12345"])
    skills: List[str] = Field(default_factory=list, examples=[["first aid", "cooking"]])
    availability: List[str] = Field(default_factory=list, examples=[["2024-07-20 to 2024-07-21"]])

    model_config = {
        "populate_by_name": True,
    }


class ProfileUpdate(BaseModel):
    """Body of ``PUT /profile/{email}``; the profile is replaced wholesale."""

    profile: Profile


class HistoryEntry(BaseModel):
    """Snapshot of an event taken when a volunteer was matched to it.

    Entries are frozen copies and are not affected when the source event
    is deleted.
    """

    event_id: str = Field(..., alias="eventId")
    event_name: str = Field(..., alias="eventName")
    event_description: str = Field(..., alias="eventDescription")
    location: str
    required_skills: List[str] = Field(..., alias="requiredSkills")
    urgency: str
    dates: List[str]
    status: str = "Registered"

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }


class User(BaseModel):
    """Stored user record."""

    email: str
    password: str
    profile: Optional[Profile] = None
    volunteer_history: List[HistoryEntry] = Field(default_factory=list, alias="volunteerHistory")

    model_config = {
        "populate_by_name": True,
    }


class UserRead(BaseModel):
    """Schema for reading a user from the API (without the password)."""

    email: str
    profile: Optional[Profile] = None
    volunteer_history: List[HistoryEntry] = Field(default_factory=list, alias="volunteerHistory")

    model_config = {
        "populate_by_name": True,
    }
