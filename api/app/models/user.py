"""
User model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
import hashlib
from app.utils.time_utils import utc_now

if TYPE_CHECKING:
    from app.models.card import Card
    from app.models.topic import Topic
    from app.models.user_session import UserSession


class User(SQLModel, table=True):
    """User table - stores account information."""
    __tablename__ = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)  # Email address, used to sign in
    password: str  # Hashed password
    created_at: datetime = Field(default_factory=utc_now)

    # Relationships
    cards: List["Card"] = Relationship(back_populates="user")
    topics: List["Topic"] = Relationship(back_populates="user")
    sessions: List["UserSession"] = Relationship(back_populates="user")

    @staticmethod
    def hash_password(password: str) -> str:
        """Simple password hashing using SHA256."""
        return hashlib.sha256(password.encode()).hexdigest()

    def verify_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""
        return self.password == self.hash_password(password)
