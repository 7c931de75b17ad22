"""
Card schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from app.models.enums import Category, CardStatus, SourceType


class CardResponse(BaseModel):
    """Card response schema."""
    id: int
    title: str
    body: str
    category: Category
    status: CardStatus
    source_type: SourceType
    source_title: Optional[str] = None
    source_url: Optional[str] = None
    scripture: Optional[str] = None
    connected_topic_ids: List[int] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CreateCardRequest(BaseModel):
    """Request schema for creating a card. Status is derived from category."""
    title: str = Field(..., min_length=1, description="One idea, stated as a claim")
    body: str = Field("", description="The idea expanded in your own words")
    category: Category = Category.UNPROCESSED
    source_type: SourceType = SourceType.NOTE
    source_title: Optional[str] = None
    source_url: Optional[str] = None
    scripture: Optional[str] = None
    connected_topic_ids: List[int] = []


class UpdateCardRequest(BaseModel):
    """Request schema for updating a card. Omitted fields are left unchanged."""
    title: Optional[str] = None
    body: Optional[str] = None
    category: Optional[Category] = None
    source_type: Optional[SourceType] = None
    source_title: Optional[str] = None
    source_url: Optional[str] = None
    scripture: Optional[str] = None
    connected_topic_ids: Optional[List[int]] = None


class CardsResponse(BaseModel):
    """Response schema for cards list."""
    cards: List[CardResponse]
    total: int


class KanbanColumn(BaseModel):
    """One kanban column."""
    category: Category
    cards: List[CardResponse]


class KanbanResponse(BaseModel):
    """Cards grouped by category, columns in canonical order."""
    columns: List[KanbanColumn]
