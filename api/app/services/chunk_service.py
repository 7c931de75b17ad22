"""
Chunk service - splits imported document text into candidate cards.
"""
import re
from dataclasses import dataclass, field
from typing import List

from app.models.enums import Category

# Paragraph boundary: two or more consecutive newlines
PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}")

MIN_CHUNK_LENGTH = 20
MAX_CHUNKS = 500
TITLE_MAX_LENGTH = 80
DEFAULT_IMPORT_CATEGORY = Category.STUDIES


@dataclass
class ChunkDraft:
    """One candidate card produced by the chunker."""
    title: str
    body: str
    category: Category = DEFAULT_IMPORT_CATEGORY
    scripture: str = ""
    connected_topic_ids: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "body": self.body,
            "category": self.category.value,
            "scripture": self.scripture,
            "connected_topic_ids": list(self.connected_topic_ids),
        }


@dataclass
class ChunkResult:
    """Chunker output: the kept drafts and how many paragraphs qualified."""
    chunks: List[ChunkDraft]
    total_found: int

    @property
    def truncated(self) -> bool:
        return self.total_found > len(self.chunks)

    @property
    def overflow(self) -> int:
        """Number of qualifying paragraphs dropped by the cap."""
        return max(self.total_found - len(self.chunks), 0)


def truncate_at_word(text: str, max_len: int) -> str:
    """
    Shorten text to at most max_len characters without splitting a word.

    Cuts at max_len, then backs off to the last space inside the cut.
    A cut with no space after its first character is kept as is.

    Args:
        text: The text to shorten
        max_len: Maximum length of the result

    Returns:
        The text itself when it already fits, otherwise the shortened text
    """
    if len(text) <= max_len:
        return text

    cut = text[:max_len]
    last_space = cut.rfind(" ")
    if last_space > 0:
        return cut[:last_space]
    return cut


def chunk_text(text: str) -> ChunkResult:
    """
    Split raw document text into at most MAX_CHUNKS candidate cards.

    Paragraphs are separated by blank lines; paragraphs shorter than
    MIN_CHUNK_LENGTH characters after trimming are dropped as noise.
    Order is preserved.

    Args:
        text: Plain document text

    Returns:
        ChunkResult with the kept drafts and the count of qualifying
        paragraphs before the cap was applied
    """
    candidates = [
        paragraph.strip()
        for paragraph in PARAGRAPH_SPLIT_RE.split(text)
    ]
    candidates = [p for p in candidates if len(p) >= MIN_CHUNK_LENGTH]

    chunks = [
        ChunkDraft(title=truncate_at_word(p, TITLE_MAX_LENGTH), body=p)
        for p in candidates[:MAX_CHUNKS]
    ]
    return ChunkResult(chunks=chunks, total_found=len(candidates))
