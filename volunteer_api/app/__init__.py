"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, profiles, events, notifications,
matching) exposes a router defined in ``api/v1/endpoints`` and keeps its
business logic in ``services``.  All records live in a single in‑memory
``RecordStore`` owned by the application instance.
"""

from .main import app, create_app  # noqa: F401
