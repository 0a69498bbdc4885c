"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services receive
the ``RecordStore`` they operate on explicitly, raise the domain errors
from ``core.errors`` and never touch HTTP concerns.
"""
