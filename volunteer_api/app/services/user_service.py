"""
Business logic for users.

Registration, credential checks, profile storage and volunteer history.
Passwords are stored and compared in plain text; this service offers no
session or token handling.
"""

import logging
from typing import Any, Dict, List

from ..core.errors import ConflictError, UnauthorizedError
from ..core.store import RecordStore
from ..schemas.user import Credentials, HistoryEntry, Profile, User


class UserService:
    """Registration, login, profiles and volunteer history."""

    @classmethod
    async def register(cls, store: RecordStore, data: Credentials) -> User:
        """Create a user with an empty profile and no history.

        Raises ``ConflictError`` when the email is already registered.
        """
        logger = logging.getLogger(__name__)
        user = User(email=data.email, password=data.password)
        try:
            store.add_user(user)
        except ConflictError:
            logger.warning("Registration rejected, %s already exists", data.email)
            raise
        logger.info("Registered user %s", data.email)
        return user

    @classmethod
    async def authenticate(cls, store: RecordStore, data: Credentials) -> User:
        """Return the user whose email and password both match.

        Raises ``UnauthorizedError`` otherwise; the error does not say
        which of the two was wrong.
        """
        user = store.get_user(data.email)
        if user is None or user.password != data.password:
            logging.getLogger(__name__).warning("Failed login for %s", data.email)
            raise UnauthorizedError("Invalid email or password.")
        return user

    @classmethod
    async def list_users(cls, store: RecordStore) -> List[User]:
        return store.list_users()

    @classmethod
    async def get_profile(cls, store: RecordStore, email: str) -> Dict[str, Any]:
        """Return the profile as a JSON‑ready dict, ``{}`` if never set."""
        user = store.require_user(email)
        if user.profile is None:
            return {}
        return user.profile.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    async def update_profile(cls, store: RecordStore, email: str, profile: Profile) -> User:
        user = store.replace_profile(email, profile)
        logging.getLogger(__name__).info("Updated profile of %s", email)
        return user

    @classmethod
    async def volunteer_history(cls, store: RecordStore, email: str) -> List[HistoryEntry]:
        return list(store.require_user(email).volunteer_history)
