"""
Matching endpoints for API v1.

``/matching-events/{email}`` lists events that fit a volunteer's skills
and availability, ``/match-volunteer`` registers a volunteer for an
event and ``/history/{email}`` returns the registrations made so far.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_api.app.core.deps import get_store
from volunteer_api.app.core.errors import ConflictError, NotFoundError
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.event import Event
from volunteer_api.app.schemas.matching import MatchRequest
from volunteer_api.app.schemas.user import HistoryEntry
from volunteer_api.app.services.matching_service import MatchingService
from volunteer_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/matching-events/{email}", response_model=List[Event])
async def matching_events(email: str, store: RecordStore = Depends(get_store)) -> List[Event]:
    """Events sharing a skill with the volunteer on a date they are available."""
    try:
        return await MatchingService.matching_events(store, email)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/match-volunteer")
async def match_volunteer(body: MatchRequest, store: RecordStore = Depends(get_store)) -> Dict[str, str]:
    """Register a volunteer for an event.

    Adds an entry to the volunteer's history and sends them a
    notification.  Returns 404 for an unknown user or event and 409 if
    the volunteer is already registered for the event.
    """
    try:
        await MatchingService.match_volunteer(store, body.email, body.event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return {"message": "Volunteer matched to event successfully."}


@router.get("/history/{email}", response_model=List[HistoryEntry])
async def volunteer_history(email: str, store: RecordStore = Depends(get_store)) -> List[HistoryEntry]:
    try:
        return await UserService.volunteer_history(store, email)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
