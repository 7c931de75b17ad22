"""
Models package - imports all models so SQLModel registers every table.
"""
# Import enums first
from app.models.enums import (
    Category,
    CardStatus,
    SourceType,
    ImportState,
    ViewMode,
    OnboardingTemplate,
)

# Import all models
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
