"""
Matching volunteers to events.

The module‑level functions are the matching engine: they decide which
events a volunteer qualifies for from the volunteer's skills and
availability.  An event qualifies when it shares at least one skill with
the volunteer and at least one of its date ranges overlaps at least one
availability range.  Date ranges are strings of the form
``"YYYY-MM-DD to YYYY-MM-DD"``; ranges that do not parse never match.

``MatchingService`` applies the engine to stored users and records a
volunteer's commitment to an event.
"""

import logging
import re
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.errors import ConflictError
from ..core.store import RecordStore
from ..schemas.event import Event
from ..schemas.user import HistoryEntry


logger = logging.getLogger(__name__)

RANGE_SEPARATOR = " to "
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DateRange = Tuple[date, date]


def parse_date_range(text: str) -> Optional[DateRange]:
    """Parse ``"YYYY-MM-DD to YYYY-MM-DD"``; return ``None`` if malformed."""
    if not isinstance(text, str):
        return None
    parts = text.split(RANGE_SEPARATOR)
    if len(parts) != 2 or not all(DATE_PATTERN.fullmatch(part) for part in parts):
        return None
    try:
        start, end = (date.fromisoformat(part) for part in parts)
    except ValueError:
        return None
    return start, end


def ranges_overlap(first: DateRange, second: DateRange) -> bool:
    """Closed‑interval overlap; ranges touching at an endpoint overlap."""
    return first[0] <= second[1] and second[0] <= first[1]


def dates_overlap(event_dates: Iterable[str], availability: Iterable[str]) -> bool:
    available = [r for r in map(parse_date_range, availability) if r is not None]
    if not available:
        return False
    for event_range in map(parse_date_range, event_dates):
        if event_range is None:
            continue
        if any(ranges_overlap(event_range, slot) for slot in available):
            return True
    return False


def skills_intersect(required_skills: Iterable[str], skills: Iterable[str]) -> bool:
    skill_set = set(skills)
    return any(skill in skill_set for skill in required_skills)


def find_matching_events(
    skills: Iterable[str],
    availability: Sequence[str],
    events: Iterable[Event],
) -> List[Event]:
    """Return the events the volunteer qualifies for, in their original order."""
    skills = set(skills)
    if not skills or not availability:
        return []
    return [
        event
        for event in events
        if skills_intersect(event.required_skills, skills)
        and dates_overlap(event.event_dates, availability)
    ]


def match_message(event_name: str) -> str:
    return f"You have been matched to the event: {event_name}"


def snapshot(event: Event) -> HistoryEntry:
    """Copy the event into a history entry with status ``Registered``."""
    return HistoryEntry(
        event_id=event.id,
        event_name=event.name,
        event_description=event.description,
        location=event.location,
        required_skills=list(event.required_skills),
        urgency=event.urgency,
        dates=list(event.event_dates),
        status="Registered",
    )


class MatchingService:
    """Volunteer‑to‑event matching."""

    @classmethod
    async def matching_events(cls, store: RecordStore, email: str) -> List[Event]:
        """Events matching the stored profile of ``email``.

        A user who never filled in a profile has no skills and no
        availability and therefore matches nothing.
        """
        user = store.require_user(email)
        profile = user.profile
        if profile is None:
            return []
        return find_matching_events(profile.skills, profile.availability, store.list_events())

    @classmethod
    async def match_volunteer(cls, store: RecordStore, email: str, event_id: str) -> HistoryEntry:
        """Register ``email`` for ``event_id`` and notify the volunteer.

        Raises ``NotFoundError`` when the user or event is missing and
        ``ConflictError`` when the user is already registered for the
        event.  The history entry and the notification are written
        together under the store lock.
        """
        logger.info("Match volunteer request received: %s -> %s", email, event_id)
        with store.transaction():
            user = store.require_user(email)
            event = store.require_event(event_id)
            if any(h.event_id == event.id for h in user.volunteer_history):
                logger.warning("%s is already matched to event %s", email, event_id)
                raise ConflictError("Volunteer already matched to this event.")
            entry = snapshot(event)
            message = match_message(event.name)
            store.append_history(user.email, entry)
            store.add_notification(user.email, message)
        logger.info("Matched %s to event %s '%s'", email, event.id, event.name)
        return entry
