"""
Preferences store - per-user display settings behind a load/save contract.
"""
import logging
from typing import Protocol

from pydantic import BaseModel
from sqlmodel import Session

from app.models.models import UserProfile, ViewMode

logger = logging.getLogger(__name__)


class Preferences(BaseModel):
    """Display preferences persisted across reloads."""
    view_mode: ViewMode = ViewMode.LIST


class PreferencesStore(Protocol):
    """Anything that can load and save a user's preferences."""

    def load(self, user_id: int) -> Preferences:
        ...

    def save(self, user_id: int, preferences: Preferences) -> Preferences:
        ...


class DatabasePreferencesStore:
    """Preferences kept on the user_profile row."""

    def __init__(self, session: Session):
        self.session = session

    def load(self, user_id: int) -> Preferences:
        profile = self.session.get(UserProfile, user_id)
        if profile is None:
            return Preferences()
        return Preferences(view_mode=profile.view_mode)

    def save(self, user_id: int, preferences: Preferences) -> Preferences:
        profile = self.session.get(UserProfile, user_id) or UserProfile(user_id=user_id)
        profile.view_mode = preferences.view_mode
        self.session.add(profile)
        self.session.commit()
        logger.info(f"Saved preferences for user {user_id}: view_mode={preferences.view_mode.value}")
        return preferences


class InMemoryPreferencesStore:
    """Process-local store, for tools and tests that run without a database."""

    def __init__(self):
        self._data: dict = {}

    def load(self, user_id: int) -> Preferences:
        return self._data.get(user_id, Preferences()).model_copy()

    def save(self, user_id: int, preferences: Preferences) -> Preferences:
        self._data[user_id] = preferences.model_copy()
        return preferences
