"""
Models module - re-exports all models.

Lets callers write:
    from app.models.models import Card, Topic
"""
# Re-export everything from the models package
from app.models.enums import (
    Category,
    CardStatus,
    SourceType,
    ImportState,
    ViewMode,
    OnboardingTemplate,
)
from app.models.user import User
from app.models.user_session import UserSession
from app.models.user_profile import UserProfile
from app.models.topic import Topic
from app.models.card import Card
from app.models.import_session import ImportSession

__all__ = [
    'Category',
    'CardStatus',
    'SourceType',
    'ImportState',
    'ViewMode',
    'OnboardingTemplate',
    'User',
    'UserSession',
    'UserProfile',
    'Topic',
    'Card',
    'ImportSession',
]
