"""
Domain errors raised by the service layer.

Services raise these exceptions and the endpoint modules translate them
into ``HTTPException`` responses.  All of them derive from ``ValueError``
so callers that only care about "the operation was rejected" can catch
the builtin.  Malformed request bodies never reach the services; they
are rejected by pydantic and reported as 400 by the handler installed in
``main.create_app``.
"""


class ServiceError(ValueError):
    """Base class for rejected operations."""


class NotFoundError(ServiceError):
    """A referenced user, event or notification does not exist."""


class ConflictError(ServiceError):
    """A uniqueness rule or a duplicate state transition was violated."""


class UnauthorizedError(ServiceError):
    """Credentials did not match a registered user."""
