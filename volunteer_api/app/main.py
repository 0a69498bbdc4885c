"""
Main entrypoint for the Volunteer Coordination API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn volunteer_api.app.main:app --reload

Each application owns its own ``RecordStore`` and ``EventDispatcher``;
pass a store to ``create_app`` to start from prepared data (tests do
this to get an isolated store per test).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.events import EventDispatcher
from .core.logging_config import setup_logging
from .core.store import RecordStore
from .services.notification_service import NotificationService


def validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``{"field", "message"}`` pairs."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})
    return errors


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Store backing the application.  A new empty store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file, settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.store = store if store is not None else RecordStore()
    app.state.dispatcher = EventDispatcher()
    NotificationService.subscribe(app.state.dispatcher, app.state.store)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = validation_errors(exc)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})

    @app.get("/", tags=["info"])
    async def root() -> Dict[str, str]:
        return {"name": settings.project_name, "version": settings.api_version}

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # Records do not outlive the process.
        app.state.store.clear()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
