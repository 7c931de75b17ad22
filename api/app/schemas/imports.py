"""
Import triage schemas.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from app.models.enums import Category, ImportState
from app.schemas.card import CardResponse


class DraftCard(BaseModel):
    """The editable draft currently under review."""
    title: str
    body: str
    category: Category
    scripture: str = ""
    connected_topic_ids: List[int] = []


class UpdateDraftRequest(BaseModel):
    """Edits to the current draft. Omitted fields are left unchanged."""
    title: Optional[str] = None
    body: Optional[str] = None
    category: Optional[Category] = None
    scripture: Optional[str] = None
    connected_topic_ids: Optional[List[int]] = None


class ImportSessionResponse(BaseModel):
    """State of an import session."""
    id: int
    state: ImportState
    filename: str
    total_chunks: int
    total_found: int
    truncated_count: int = 0  # Paragraphs beyond the chunk cap that were dropped
    current_index: int
    approved: int
    skipped: int
    progress: float
    draft: Optional[DraftCard] = None
    created_at: Optional[datetime] = None
    message: Optional[str] = None


class ApproveResponse(BaseModel):
    """Result of approving a draft."""
    card: CardResponse
    session: ImportSessionResponse
