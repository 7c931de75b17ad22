"""
Shared endpoint dependencies.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.core.database import get_session
from app.core.exceptions import AuthenticationError
from app.models.models import User
from app.services.preferences_service import DatabasePreferencesStore, PreferencesStore
from app.services.user_service import resolve_session

bearer_scheme = HTTPBearer(auto_error=False)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_session)
) -> Optional[User]:
    """The signed-in user, or None when the request carries no valid session."""
    if credentials is None or not credentials.credentials:
        return None
    return resolve_session(session, credentials.credentials)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """The signed-in user; rejects the request when there is none."""
    if user is None:
        raise AuthenticationError("Not authenticated.")
    return user


def get_preferences_store(session: Session = Depends(get_session)) -> PreferencesStore:
    return DatabasePreferencesStore(session)
