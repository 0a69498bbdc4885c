"""
Tests for matching events, volunteer matching and volunteer history.
"""

import pytest

from volunteer_api.app.core.errors import ConflictError
from volunteer_api.app.schemas.event import Event, EventCreate
from volunteer_api.app.schemas.user import User
from volunteer_api.app.services.matching_service import MatchingService

from tests.payloads import API, EVENT, PROFILE


@pytest.fixture
def volunteer(client, register):
    email = "volunteer@example.com"
    register(email)
    response = client.put(f"{API}/profile/{email}", json={"profile": PROFILE})
    assert response.status_code == 200
    return email


def match(client, email, event_id):
    return client.post(f"{API}/match-volunteer", json={"email": email, "eventId": event_id})


def test_matching_events(client, volunteer, create_event):
    wanted = create_event(name="Matching Event", requiredSkills=["skill1"])
    create_event(name="Other Skill", requiredSkills=["skillX"])
    create_event(name="Other Dates", eventDates=["2024-08-01 to 2024-08-02"])

    response = client.get(f"{API}/matching-events/{volunteer}")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [wanted["id"]]


def test_matching_events_without_profile(client, register, create_event):
    register("blank@example.com")
    create_event()
    response = client.get(f"{API}/matching-events/blank@example.com")
    assert response.status_code == 200
    assert response.json() == []


def test_matching_events_unknown_user(client):
    assert client.get(f"{API}/matching-events/ghost@example.com").status_code == 404


def test_match_volunteer(client, volunteer, create_event):
    event = create_event(name="Volunteer Event")
    response = match(client, volunteer, event["id"])
    assert response.status_code == 200
    assert response.json()["message"] == "Volunteer matched to event successfully."

    history = client.get(f"{API}/history/{volunteer}").json()
    assert history == [
        {
            "eventId": event["id"],
            "eventName": "Volunteer Event",
            "eventDescription": event["description"],
            "location": event["location"],
            "requiredSkills": event["requiredSkills"],
            "urgency": event["urgency"],
            "dates": event["eventDates"],
            "status": "Registered",
        }
    ]
    messages = [n["message"] for n in client.get(f"{API}/notifications/{volunteer}").json()]
    assert messages[-1] == "You have been matched to the event: Volunteer Event"


def test_second_match_conflicts(client, volunteer, create_event, store):
    event = create_event()
    assert match(client, volunteer, event["id"]).status_code == 200
    before = len(store.list_notifications(volunteer))

    response = match(client, volunteer, event["id"])

    assert response.status_code == 409
    assert len(client.get(f"{API}/history/{volunteer}").json()) == 1
    assert len(store.list_notifications(volunteer)) == before


def test_match_unknown_user_or_event(client, volunteer, create_event):
    event = create_event()
    assert match(client, "ghost@example.com", event["id"]).status_code == 404
    assert match(client, volunteer, "no-such-event").status_code == 404
    assert client.get(f"{API}/history/{volunteer}").json() == []


def test_match_validation(client):
    response = client.post(f"{API}/match-volunteer", json={"email": "bad", "eventId": ""})
    assert response.status_code == 400
    assert {e["field"] for e in response.json()["errors"]} == {"email", "eventId"}


def test_history_survives_event_deletion(client, volunteer, create_event):
    event = create_event(name="Short Lived")
    match(client, volunteer, event["id"])
    assert client.delete(f"{API}/events/{event['id']}").status_code == 200

    history = client.get(f"{API}/history/{volunteer}").json()
    assert [h["eventName"] for h in history] == ["Short Lived"]


def test_history_unknown_user(client):
    assert client.get(f"{API}/history/ghost@example.com").status_code == 404


@pytest.mark.asyncio
async def test_match_service_conflict_leaves_no_partial_state(store):
    volunteer = "direct@example.com"
    store.add_user(User(email=volunteer, password="password123"))
    event = store.add_event(Event(id="evt-1", **EventCreate(**EVENT).model_dump()))
    await MatchingService.match_volunteer(store, volunteer, event.id)
    notifications = len(store.list_notifications())

    with pytest.raises(ConflictError):
        await MatchingService.match_volunteer(store, volunteer, event.id)

    assert len(store.require_user(volunteer).volunteer_history) == 1
    assert len(store.list_notifications()) == notifications
