"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (users, profiles, events,
notifications, matching) under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import events, matching, notifications, profiles, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(profiles.router, prefix="/profile", tags=["profiles"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
# The matching router defines /matching-events, /match-volunteer and
# /history itself, so it is mounted without a prefix.
router.include_router(matching.router, tags=["matching"])
