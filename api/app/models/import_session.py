"""
ImportSession model - a document split into drafts awaiting triage.
"""
from sqlmodel import SQLModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from sqlalchemy import Column, JSON, String as SAString
from app.models.enums import ImportState
from app.utils.time_utils import utc_now


class ImportSession(SQLModel, table=True):
    """Server-side state of one upload → triage → complete walk."""
    __tablename__ = "import_session"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    filename: str = ""
    state: ImportState = Field(
        default=ImportState.UPLOAD,
        sa_column=Column(SAString, default=ImportState.UPLOAD.value, nullable=False)
    )
    # Drafts in chunker order: {title, body, category, scripture, connected_topic_ids}
    chunks: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_found: int = Field(default=0)  # Paragraphs found before the chunk cap
    current_index: int = Field(default=0)
    approved: int = Field(default=0)
    skipped: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
