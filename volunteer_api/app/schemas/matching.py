"""
Pydantic models for volunteer matching requests.
"""

from pydantic import BaseModel, Field

from .common import Email


class MatchRequest(BaseModel):
    """Body of ``POST /match-volunteer``."""

    email: Email = Field(..., examples=["volunteer@example.com"])
    event_id: str = Field(..., alias="eventId", min_length=1)

    model_config = {
        "populate_by_name": True,
    }
