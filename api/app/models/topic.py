"""
Topic model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, JSON
from app.utils.time_utils import utc_now

if TYPE_CHECKING:
    from app.models.user import User


class Topic(SQLModel, table=True):
    """Topic table - one node of a user's slip-box tree."""
    __tablename__ = "topic"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    number: str = Field(index=True)  # Hierarchical code (1, 1a, 1a1, ...), immutable
    title: str
    emoji: str = ""  # Single emoji character
    level: int = Field(default=0)  # Depth, root = 0
    parent_id: Optional[int] = Field(default=None, foreign_key="topic.id", index=True)
    related_topic_ids: List[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now)

    # Relationships
    user: "User" = Relationship(back_populates="topics")
