"""
Business logic for events.

Events are created, listed, fetched and deleted; they are never edited.
Creating an event publishes ``EventCreated`` so subscribed handlers (the
new‑event broadcast) run inside the same store transaction.  Deleting an
event leaves volunteer history untouched, since history entries are
copies.
"""

import logging
import uuid
from typing import List

from ..core.events import EventCreated, EventDispatcher
from ..core.store import RecordStore
from ..schemas.event import Event, EventCreate


class EventService:
    """Create, list, fetch and delete volunteer events."""

    @classmethod
    async def create_event(cls, store: RecordStore, dispatcher: EventDispatcher, data: EventCreate) -> Event:
        """Store a new event under a fresh id and announce it."""
        logger = logging.getLogger(__name__)
        event = Event(id=uuid.uuid4().hex, **data.model_dump())
        with store.transaction():
            store.add_event(event)
            dispatcher.publish(EventCreated(event=event))
        logger.info("Created event %s '%s'", event.id, event.name)
        return event

    @classmethod
    async def list_events(cls, store: RecordStore) -> List[Event]:
        return store.list_events()

    @classmethod
    async def get_event(cls, store: RecordStore, event_id: str) -> Event:
        """Retrieve a single event by ID.  Raises ``NotFoundError`` if absent."""
        return store.require_event(event_id)

    @classmethod
    async def delete_event(cls, store: RecordStore, event_id: str) -> None:
        logger = logging.getLogger(__name__)
        logger.info("Delete event request received: %s", event_id)
        event = store.delete_event(event_id)
        logger.info("Deleted event %s '%s'", event.id, event.name)
