"""
FastAPI dependencies giving handlers access to application state.

``create_app`` attaches a ``RecordStore`` and an ``EventDispatcher`` to
``app.state``; routes receive them with ``Depends(get_store)`` and
``Depends(get_dispatcher)``.
"""

from fastapi import Request

from .events import EventDispatcher
from .store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.dispatcher
