"""
Document service - turns uploaded files into plain text for chunking.
"""
import io
import logging
from pathlib import PurePath

import docx

from app.core.exceptions import UnsupportedFileError, DocumentReadError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("txt", "md", "docx")


def file_extension(filename: str) -> str:
    """Lowercased extension without the dot ('' when there is none)."""
    return PurePath(filename).suffix.lstrip(".").lower()


def source_name(filename: str) -> str:
    """Filename with its final extension stripped (used as card source title)."""
    name = PurePath(filename).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _docx_to_text(content: bytes) -> str:
    """Paragraphs and table cells of a .docx, separated by blank lines."""
    document = docx.Document(io.BytesIO(content))
    blocks = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                blocks.append(cell.text)
    return "\n\n".join(blocks)


def extract_text(filename: str, content: bytes) -> str:
    """
    Extract plain text from an uploaded file.

    Args:
        filename: Original filename (its extension selects the reader)
        content: Raw file bytes

    Returns:
        Plain text with LF line endings

    Raises:
        UnsupportedFileError: If the extension is not .txt, .md or .docx
        DocumentReadError: If the file cannot be decoded or converted
    """
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileError("Unsupported file type. Please upload .txt, .md, or .docx")

    try:
        if ext == "docx":
            text = _docx_to_text(content)
        else:
            text = content.decode("utf-8-sig")
    except Exception as e:
        logger.warning(f"Failed to read uploaded file {filename}: {type(e).__name__}: {e}")
        raise DocumentReadError("Failed to read file. Please try again.") from e

    return _normalize_newlines(text)
