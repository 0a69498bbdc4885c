"""
Tests for the in-memory record store and the domain event dispatcher.
"""

import pytest

from volunteer_api.app.core.errors import ConflictError, NotFoundError
from volunteer_api.app.core.events import EventCreated, EventDispatcher
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.event import Event
from volunteer_api.app.schemas.user import User
from volunteer_api.app.services.matching_service import snapshot


def make_event(event_id="e1"):
    return Event(
        id=event_id,
        name="Cleanup",
        description="Park cleanup",
        location="Park",
        required_skills=["lifting"],
        urgency="Low",
        event_dates=["2024-05-01 to 2024-05-01"],
    )


def test_duplicate_email_is_rejected():
    store = RecordStore()
    store.add_user(User(email="a@example.com", password="secret1"))
    with pytest.raises(ConflictError):
        store.add_user(User(email="a@example.com", password="other22"))
    assert len(store.list_users()) == 1


def test_missing_records_raise_not_found():
    store = RecordStore()
    assert store.get_user("nobody@example.com") is None
    with pytest.raises(NotFoundError):
        store.require_user("nobody@example.com")
    with pytest.raises(NotFoundError):
        store.delete_event("missing")
    with pytest.raises(NotFoundError):
        store.delete_notification("nobody@example.com", "hi")


def test_delete_notification_removes_oldest_duplicate_only():
    store = RecordStore()
    first = store.add_notification("a@example.com", "hello")
    store.add_notification("b@example.com", "hello")
    second = store.add_notification("a@example.com", "hello")

    removed = store.delete_notification("a@example.com", "hello")

    assert removed.sequence == first.sequence
    remaining = store.list_notifications("a@example.com")
    assert [n.sequence for n in remaining] == [second.sequence]
    assert len(store.list_notifications("b@example.com")) == 1


def test_events_keep_insertion_order():
    store = RecordStore()
    for event_id in ("z", "a", "m"):
        store.add_event(make_event(event_id))
    assert [e.id for e in store.list_events()] == ["z", "a", "m"]
    store.delete_event("a")
    assert [e.id for e in store.list_events()] == ["z", "m"]


def test_duplicate_event_id_is_rejected():
    store = RecordStore()
    store.add_event(make_event("same"))
    with pytest.raises(ConflictError):
        store.add_event(make_event("same"))


def test_transaction_is_reentrant():
    store = RecordStore()
    with store.transaction():
        with store.transaction():
            store.add_notification("a@example.com", "nested")
    assert len(store.list_notifications()) == 1


def test_clear_empties_every_collection():
    store = RecordStore()
    store.add_user(User(email="a@example.com", password="secret1"))
    store.add_event(make_event())
    store.add_notification("a@example.com", "hi")
    store.clear()
    assert store.list_users() == []
    assert store.list_events() == []
    assert store.list_notifications() == []


def test_dispatcher_calls_handlers_in_subscription_order():
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.subscribe(EventCreated, lambda e: calls.append(("first", e.event.id)))
    dispatcher.subscribe(EventCreated, lambda e: calls.append(("second", e.event.id)))

    dispatcher.publish(EventCreated(event=make_event("x")))

    assert calls == [("first", "x"), ("second", "x")]


def test_failed_transaction_restores_every_collection():
    store = RecordStore()
    store.add_user(User(email="a@example.com", password="secret1"))
    store.add_event(make_event("kept"))

    with pytest.raises(RuntimeError):
        with store.transaction():
            store.add_event(make_event("dropped"))
            store.add_notification("a@example.com", "dropped")
            store.delete_event("kept")
            with store.transaction():
                store.append_history("a@example.com", snapshot(make_event("kept")))
            raise RuntimeError("handler failed")

    assert [e.id for e in store.list_events()] == ["kept"]
    assert store.list_notifications() == []
    assert store.require_user("a@example.com").volunteer_history == []


def test_store_usable_after_rollback():
    store = RecordStore()
    with pytest.raises(ConflictError):
        with store.transaction():
            store.add_user(User(email="a@example.com", password="secret1"))
            store.add_user(User(email="a@example.com", password="secret1"))
    assert store.list_users() == []
    store.add_user(User(email="a@example.com", password="secret1"))
    assert len(store.list_users()) == 1
