"""
Domain events and a synchronous dispatcher.

Side effects that follow a state change (for example notifying every
user when an event is announced) are expressed as domain events.  A
service publishes the event and the handlers subscribed to its type run
immediately, in subscription order, on the caller's thread.  Handler
exceptions propagate to the publisher.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Type

from ..schemas.event import Event


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for everything published on the dispatcher."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc), kw_only=True)


@dataclass(frozen=True)
class EventCreated(DomainEvent):
    """A volunteer event was added to the store."""

    event: Event


Handler = Callable[[DomainEvent], None]


class EventDispatcher:
    """Maps domain event types to their handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Handler]:
        return list(self._handlers.get(event_type, []))

    def publish(self, domain_event: DomainEvent) -> None:
        handlers = self.handlers_for(type(domain_event))
        logger.debug("Publishing %s to %d handler(s)", type(domain_event).__name__, len(handlers))
        for handler in handlers:
            handler(domain_event)
