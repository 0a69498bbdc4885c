"""
Business logic for notifications.

Notifications are created explicitly through the API, by the broadcast
handler whenever a new event is announced, and by volunteer matching.
Recipients do not have to be registered users.
"""

import logging
from typing import List

from ..core.events import EventCreated, EventDispatcher
from ..core.store import RecordStore
from ..schemas.notification import Notification, NotificationCreate


logger = logging.getLogger(__name__)


def new_event_message(event_name: str) -> str:
    return f"New event: {event_name}"


class NotificationService:
    """Create, list and delete notifications."""

    @classmethod
    async def create_notification(cls, store: RecordStore, data: NotificationCreate) -> Notification:
        notification = store.add_notification(data.email, data.message)
        logger.info("Notification created for %s", data.email)
        return notification

    @classmethod
    async def list_notifications(cls, store: RecordStore, email: str) -> List[Notification]:
        return store.list_notifications(email)

    @classmethod
    async def delete_notification(cls, store: RecordStore, email: str, message: str) -> None:
        """Delete the oldest notification with this exact email and message.

        Raises ``NotFoundError`` when there is none.  Other notifications
        with the same pair are left in place.
        """
        store.delete_notification(email, message)
        logger.info("Notification deleted for %s", email)

    @classmethod
    def subscribe(cls, dispatcher: EventDispatcher, store: RecordStore) -> None:
        """Attach the new‑event broadcast to ``dispatcher``."""

        def broadcast_new_event(domain_event: EventCreated) -> None:
            message = new_event_message(domain_event.event.name)
            with store.transaction():
                users = store.list_users()
                for user in users:
                    store.add_notification(user.email, message)
            logger.info(
                "Broadcast '%s' to %d user(s), event created at %s",
                message,
                len(users),
                domain_event.occurred_at.isoformat(),
            )

        dispatcher.subscribe(EventCreated, broadcast_new_event)
