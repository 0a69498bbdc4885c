"""
In‑memory record store.

``RecordStore`` owns the three collections the API works with: users
(keyed by email), events (keyed by id) and notifications (an ordered
list).  Nothing is persisted; a store lives as long as the application
instance that created it.

Every public method takes the store lock.  Services that need several
steps to be applied as one unit wrap them in ``transaction()``: the lock
is held for the whole block, and if the block raises, the collections
are restored to their state at the start of the outermost transaction.
"""

import itertools
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..schemas.event import Event
from ..schemas.notification import Notification
from ..schemas.user import HistoryEntry, Profile, User
from .errors import ConflictError, NotFoundError


logger = logging.getLogger(__name__)


class RecordStore:
    """Container for users, events and notifications."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._events: Dict[str, Event] = {}
        self._notifications: List[Notification] = []
        self._sequence = itertools.count(1)
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        """Apply the block as one unit or not at all.

        Nested transactions join the outermost one.  Sequence numbers
        handed out inside a rolled back block are not reused.
        """
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self
                finally:
                    self._depth -= 1
                return

            users = {email: user.model_copy(deep=True) for email, user in self._users.items()}
            events = dict(self._events)
            notifications = list(self._notifications)
            self._depth = 1
            try:
                yield self
            except BaseException:
                self._users, self._events, self._notifications = users, events, notifications
                logger.warning("Transaction rolled back")
                raise
            finally:
                self._depth = 0

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            self._users.clear()
            self._events.clear()
            self._notifications.clear()
            self._sequence = itertools.count(1)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def add_user(self, user: User) -> User:
        with self._lock:
            if user.email in self._users:
                raise ConflictError("User already exists.")
            self._users[user.email] = user
            return user

    def get_user(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email)

    def require_user(self, email: str) -> User:
        user = self.get_user(email)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def replace_profile(self, email: str, profile: Profile) -> User:
        with self._lock:
            user = self.require_user(email)
            user.profile = profile
            return user

    def append_history(self, email: str, entry: HistoryEntry) -> None:
        """Add a history entry, rejecting a second entry for the same event."""
        with self._lock:
            user = self.require_user(email)
            if any(h.event_id == entry.event_id for h in user.volunteer_history):
                raise ConflictError("Volunteer already matched to this event.")
            user.volunteer_history.append(entry)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_event(self, event: Event) -> Event:
        with self._lock:
            if event.id in self._events:
                raise ConflictError(f"Event {event.id} already exists.")
            self._events[event.id] = event
            return event

    def get_event(self, event_id: str) -> Optional[Event]:
        with self._lock:
            return self._events.get(event_id)

    def require_event(self, event_id: str) -> Event:
        event = self.get_event(event_id)
        if event is None:
            raise NotFoundError("Event not found.")
        return event

    def list_events(self) -> List[Event]:
        with self._lock:
            return list(self._events.values())

    def delete_event(self, event_id: str) -> Event:
        with self._lock:
            try:
                return self._events.pop(event_id)
            except KeyError:
                raise NotFoundError("Event not found.") from None

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def add_notification(self, email: str, message: str) -> Notification:
        with self._lock:
            notification = Notification(email=email, message=message, sequence=next(self._sequence))
            self._notifications.append(notification)
            return notification

    def list_notifications(self, email: Optional[str] = None) -> List[Notification]:
        with self._lock:
            if email is None:
                return list(self._notifications)
            return [n for n in self._notifications if n.email == email]

    def delete_notification(self, email: str, message: str) -> Notification:
        """Remove the earliest inserted notification matching both fields."""
        with self._lock:
            matches = [
                (n.sequence, index)
                for index, n in enumerate(self._notifications)
                if n.email == email and n.message == message
            ]
            if not matches:
                raise NotFoundError("Notification not found.")
            _, index = min(matches)
            return self._notifications.pop(index)
