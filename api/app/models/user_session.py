"""
UserSession model - bearer tokens issued at login.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import TYPE_CHECKING
from datetime import datetime
from app.utils.time_utils import utc_now

if TYPE_CHECKING:
    from app.models.user import User


class UserSession(SQLModel, table=True):
    """An opaque login token and the user it belongs to."""
    __tablename__ = "user_session"

    token: str = Field(primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime

    # Relationships
    user: "User" = Relationship(back_populates="sessions")
