"""
Event endpoints for API v1.

Events can be created, listed, fetched and deleted.  Creating an event
notifies every registered user.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_api.app.core.deps import get_dispatcher, get_store
from volunteer_api.app.core.errors import NotFoundError
from volunteer_api.app.core.events import EventDispatcher
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.event import Event, EventCreate
from volunteer_api.app.services.event_service import EventService


router = APIRouter()


@router.post("/", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    store: RecordStore = Depends(get_store),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
) -> Event:
    """Create a new event.

    Every field is required; ``requiredSkills`` and ``eventDates`` must
    contain at least one entry.  The response includes the generated
    ``id``.
    """
    return await EventService.create_event(store, dispatcher, event)


@router.get("/", response_model=List[Event])
async def list_events(store: RecordStore = Depends(get_store)) -> List[Event]:
    return await EventService.list_events(store)


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: str, store: RecordStore = Depends(get_store)) -> Event:
    """Retrieve a single event by its ID.  Raises 404 if not found."""
    try:
        return await EventService.get_event(store, event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{event_id}")
async def delete_event(event_id: str, store: RecordStore = Depends(get_store)) -> Dict[str, str]:
    """Delete an event.

    Volunteer history entries that reference the event are kept.
    """
    try:
        await EventService.delete_event(store, event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return {"message": "Event deleted successfully."}
