"""
User service for business logic related to accounts and login sessions.
"""
import logging
import secrets
from datetime import timedelta
from typing import Optional

from sqlmodel import Session, select

from app.core.config import settings
from app.models.models import User, UserSession
from app.utils.time_utils import as_utc, utc_now

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(session: Session, email: str, password: str) -> User:
    """
    Create a new account.

    Raises:
        ValueError: If the email is already registered
    """
    email = normalize_email(email)
    existing = session.exec(select(User).where(User.email == email)).first()
    if existing:
        raise ValueError("Email already exists")

    user = User(email=email, password=User.hash_password(password))
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate(session: Session, email: str, password: str) -> Optional[User]:
    """The user matching the credentials, or None."""
    user = session.exec(select(User).where(User.email == normalize_email(email))).first()
    if not user or not user.verify_password(password):
        return None
    return user


def create_session(session: Session, user: User) -> UserSession:
    """Issue a new bearer token for the user."""
    now = utc_now()
    user_session = UserSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=now + timedelta(hours=settings.session_ttl_hours),
    )
    session.add(user_session)
    session.commit()
    session.refresh(user_session)
    return user_session


def resolve_session(session: Session, token: str) -> Optional[User]:
    """The user owning a valid, unexpired token, or None."""
    user_session = session.get(UserSession, token)
    if user_session is None:
        return None
    if as_utc(user_session.expires_at) <= utc_now():
        session.delete(user_session)
        session.commit()
        return None
    return session.get(User, user_session.user_id)


def revoke_session(session: Session, token: str) -> bool:
    """Delete a token. Returns whether it existed."""
    user_session = session.get(UserSession, token)
    if user_session is None:
        return False
    session.delete(user_session)
    session.commit()
    return True
