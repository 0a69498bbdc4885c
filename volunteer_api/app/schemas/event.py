"""
Pydantic models for event data.

The ``EventBase`` class contains shared fields; ``EventCreate`` is the
request body and ``Event`` adds the generated ``id`` and is both the
stored record and the response schema.
"""

from typing import List

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Food Drive"])
    description: str = Field(..., min_length=1, examples=["Sort and pack donations"])
    location: str = Field(..., min_length=1, examples=["Community Center"])
    required_skills: List[str] = Field(..., alias="requiredSkills", min_length=1, examples=[["lifting"]])
    urgency: str = Field(..., min_length=1, examples=["High"])
    event_dates: List[str] = Field(..., alias="eventDates", min_length=1, examples=[["2024-07-20 to 2024-07-21"]])

    model_config = {
        "populate_by_name": True,
    }


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class Event(EventBase):
    """An event as stored and returned by the API."""

    id: str
