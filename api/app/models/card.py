"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, JSON, String as SAString
from app.models.enums import Category, CardStatus, SourceType
from app.utils.time_utils import utc_now

if TYPE_CHECKING:
    from app.models.user import User


class Card(SQLModel, table=True):
    """Card table - one captured idea."""
    __tablename__ = "card"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    title: str
    body: str = ""
    category: Category = Field(
        default=Category.UNPROCESSED,
        sa_column=Column(SAString, default=Category.UNPROCESSED.value, nullable=False)
    )
    status: CardStatus = Field(
        default=CardStatus.UNPROCESSED,
        sa_column=Column(SAString, default=CardStatus.UNPROCESSED.value, nullable=False)
    )  # Always derived from category on write
    source_type: SourceType = Field(
        default=SourceType.NOTE,
        sa_column=Column(SAString, default=SourceType.NOTE.value, nullable=False)
    )
    source_title: Optional[str] = None
    source_url: Optional[str] = None
    scripture: Optional[str] = None  # Free-form scripture reference
    connected_topic_ids: List[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now)

    # Relationships
    user: "User" = Relationship(back_populates="cards")
