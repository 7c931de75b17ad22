"""
UserProfile model - onboarding state and display preferences.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from sqlalchemy import Column, String as SAString
from app.models.enums import ViewMode


class UserProfile(SQLModel, table=True):
    """One row per user; created lazily on first onboarding or preference save."""
    __tablename__ = "user_profile"

    user_id: int = Field(foreign_key="user.id", primary_key=True)
    onboarding_complete: bool = Field(default=False)
    template: Optional[str] = None  # OnboardingTemplate value chosen during onboarding
    view_mode: ViewMode = Field(
        default=ViewMode.LIST,
        sa_column=Column(SAString, default=ViewMode.LIST.value, nullable=False)
    )  # 'list' or 'kanban' - stored as string, converted to enum
