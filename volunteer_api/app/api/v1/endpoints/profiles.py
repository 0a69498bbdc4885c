"""
Profile endpoints for API v1.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_api.app.core.deps import get_store
from volunteer_api.app.core.errors import NotFoundError
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.user import ProfileUpdate
from volunteer_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/{email}")
async def get_profile(email: str, store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    """Return the user's profile, or ``{}`` if it was never filled in."""
    try:
        return await UserService.get_profile(store, email)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{email}")
async def update_profile(
    email: str,
    body: ProfileUpdate,
    store: RecordStore = Depends(get_store),
) -> Dict[str, str]:
    """Replace the user's profile.

    Field limits: full name up to 50 characters, address lines and city
    up to 100, a two‑letter state code and a zip code of 5 to 9
    characters.
    """
    try:
        await UserService.update_profile(store, email, body.profile)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return {"message": "Profile updated successfully."}
