"""
User endpoints for API v1.

Registration, login and listing of users.  Login only checks the
credentials; no token or session is issued.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_api.app.core.deps import get_store
from volunteer_api.app.core.errors import ConflictError, UnauthorizedError
from volunteer_api.app.core.store import RecordStore
from volunteer_api.app.schemas.user import Credentials, UserRead
from volunteer_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_user(data: Credentials, store: RecordStore = Depends(get_store)) -> Dict[str, str]:
    """Register a new user.

    The email must be well formed and the password at least six
    characters long.  Returns 409 if the email is already registered.
    """
    try:
        await UserService.register(store, data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return {"message": "User registered successfully."}


@router.post("/login")
async def login_user(data: Credentials, store: RecordStore = Depends(get_store)) -> Dict[str, str]:
    """Check that the email and password belong to a registered user."""
    try:
        user = await UserService.authenticate(store, data)
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e
    return {"message": "Login successful.", "email": user.email}


@router.get("/", response_model=List[UserRead])
async def list_users(store: RecordStore = Depends(get_store)) -> List[UserRead]:
    """List every registered user with profile and volunteer history."""
    users = await UserService.list_users(store)
    return [
        UserRead(email=u.email, profile=u.profile, volunteer_history=u.volunteer_history)
        for u in users
    ]
