"""
Triage service - the one-at-a-time review of an imported document.

An import session moves upload → triage → complete. In triage the current
draft can be edited, then approved (persisted as a card) or skipped; either
disposition advances to the next draft in chunker order. Reset returns any
session to upload.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm.attributes import flag_modified
from sqlmodel import Session

from app.core.exceptions import EmptyDocumentError, InvalidTransitionError
from app.models.models import Card, Category, ImportSession, ImportState, SourceType
from app.services import card_service
from app.services.chunk_service import ChunkResult
from app.services.document_service import source_name
from app.utils.time_utils import utc_now

logger = logging.getLogger(__name__)

DRAFT_FIELDS = ("title", "body", "category", "scripture", "connected_topic_ids")


def _touch(import_session: ImportSession) -> None:
    import_session.updated_at = utc_now()


def _require_state(import_session: ImportSession, state: ImportState) -> None:
    if import_session.state != state:
        raise InvalidTransitionError(
            f"Import session is in state '{ImportState(import_session.state).value}', expected '{state.value}'"
        )


def start(import_session: ImportSession, filename: str, result: ChunkResult) -> ImportSession:
    """
    Move a session from upload to triage with the chunker's drafts.

    Raises:
        InvalidTransitionError: If the session is not in upload
        EmptyDocumentError: If the chunker found nothing
    """
    _require_state(import_session, ImportState.UPLOAD)
    if not result.chunks:
        raise EmptyDocumentError(
            "No content found. Make sure the file has paragraphs separated by blank lines."
        )
    import_session.filename = filename
    import_session.chunks = [chunk.to_dict() for chunk in result.chunks]
    import_session.total_found = result.total_found
    import_session.current_index = 0
    import_session.approved = 0
    import_session.skipped = 0
    import_session.state = ImportState.TRIAGE
    flag_modified(import_session, "chunks")
    _touch(import_session)
    return import_session


def current_draft(import_session: ImportSession) -> Optional[Dict[str, Any]]:
    """The draft under review, or None outside triage."""
    if import_session.state != ImportState.TRIAGE:
        return None
    return dict(import_session.chunks[import_session.current_index])


def edit_draft(import_session: ImportSession, changes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply edits to the current draft. Keys other than the draft fields and
    None values are ignored.

    Raises:
        InvalidTransitionError: If the session is not in triage
        ValueError: If the category is Unprocessed
    """
    _require_state(import_session, ImportState.TRIAGE)
    draft = dict(import_session.chunks[import_session.current_index])
    for key in DRAFT_FIELDS:
        value = changes.get(key)
        if value is None:
            continue
        if key == "category":
            value = Category(value)
            if value == Category.UNPROCESSED:
                raise ValueError("Imported cards cannot be Unprocessed")
            value = value.value
        elif key == "connected_topic_ids":
            value = list(value)
        draft[key] = value

    chunks = list(import_session.chunks)
    chunks[import_session.current_index] = draft
    import_session.chunks = chunks
    flag_modified(import_session, "chunks")
    _touch(import_session)
    return draft


def _advance(import_session: ImportSession) -> None:
    next_index = import_session.current_index + 1
    if next_index >= len(import_session.chunks):
        import_session.state = ImportState.COMPLETE
    else:
        import_session.current_index = next_index
    _touch(import_session)


def approve(
    session: Session,
    import_session: ImportSession,
    changes: Optional[Dict[str, Any]] = None
) -> Card:
    """
    Persist the current draft as a card, then advance.

    The card is committed before the session moves; if the write fails the
    session stays on the same draft.

    Raises:
        InvalidTransitionError: If the session is not in triage
        ValueError: If the draft is invalid (empty title, unknown topics)
    """
    _require_state(import_session, ImportState.TRIAGE)
    if changes:
        edit_draft(import_session, changes)
    draft = current_draft(import_session)

    card = card_service.create_card(
        session,
        import_session.user_id,
        title=draft["title"],
        body=draft["body"],
        category=Category(draft["category"]),
        source_type=SourceType.NOTE,
        source_title=source_name(import_session.filename),
        source_url="",
        scripture=draft.get("scripture") or "",
        connected_topic_ids=draft.get("connected_topic_ids") or [],
        commit=False,
    )
    session.flush()

    import_session.approved += 1
    _advance(import_session)
    session.add(import_session)
    session.commit()
    session.refresh(card)
    logger.info(
        f"Import {import_session.id}: approved draft as card {card.id} "
        f"({import_session.approved + import_session.skipped}/{len(import_session.chunks)})"
    )
    return card


def skip(import_session: ImportSession) -> ImportSession:
    """
    Discard the current draft and advance.

    Raises:
        InvalidTransitionError: If the session is not in triage
    """
    _require_state(import_session, ImportState.TRIAGE)
    import_session.skipped += 1
    _advance(import_session)
    return import_session


def reset(import_session: ImportSession) -> ImportSession:
    """Return to upload, clearing drafts and counters."""
    import_session.state = ImportState.UPLOAD
    import_session.filename = ""
    import_session.chunks = []
    import_session.total_found = 0
    import_session.current_index = 0
    import_session.approved = 0
    import_session.skipped = 0
    flag_modified(import_session, "chunks")
    _touch(import_session)
    return import_session


def progress(import_session: ImportSession) -> float:
    """Percentage of drafts already disposed of."""
    total = len(import_session.chunks)
    if total == 0:
        return 0.0
    return (import_session.approved + import_session.skipped) / total * 100
