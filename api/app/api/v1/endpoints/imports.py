"""
Import triage endpoints.

Upload a document, then walk its drafts one at a time: edit, approve
(creates a card) or skip, until the session is complete.
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlmodel import Session
from typing import Optional
import logging
from app.api.deps import get_current_user
from app.core.config import settings
from app.core.database import get_session
from app.models.models import ImportSession, User
from app.schemas.card import CardResponse
from app.schemas.imports import (
    ApproveResponse,
    DraftCard,
    ImportSessionResponse,
    UpdateDraftRequest
)
from app.services import triage_service
from app.services.chunk_service import MAX_CHUNKS, chunk_text
from app.services.document_service import extract_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/imports", tags=["imports"])


def _session_response(import_session: ImportSession, message: Optional[str] = None) -> ImportSessionResponse:
    draft = triage_service.current_draft(import_session)
    total_chunks = len(import_session.chunks)
    return ImportSessionResponse(
        id=import_session.id,
        state=import_session.state,
        filename=import_session.filename,
        total_chunks=total_chunks,
        total_found=import_session.total_found,
        truncated_count=max(import_session.total_found - total_chunks, 0),
        current_index=import_session.current_index,
        approved=import_session.approved,
        skipped=import_session.skipped,
        progress=triage_service.progress(import_session),
        draft=DraftCard(**draft) if draft else None,
        created_at=import_session.created_at,
        message=message
    )


def _load(session: Session, user: User, import_id: int) -> ImportSession:
    import_session = session.get(ImportSession, import_id)
    if not import_session or import_session.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Import session not found")
    return import_session


@router.post("", response_model=ImportSessionResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """
    Upload a .txt, .md or .docx file and start triaging it.

    The file is split into paragraphs; at most the first 500 become drafts.

    Returns:
        The new import session, positioned on its first draft
    """
    # One byte past the cap is enough to tell an oversized file apart
    content = await file.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File is larger than {settings.max_upload_bytes} bytes"
        )

    filename = file.filename or ""
    text = extract_text(filename, content)
    result = chunk_text(text)

    import_session = ImportSession(user_id=user.id)
    triage_service.start(import_session, filename, result)
    session.add(import_session)
    session.commit()
    session.refresh(import_session)

    message = None
    if result.truncated:
        message = (
            f"Found {result.total_found} paragraphs; only the first {MAX_CHUNKS} were imported "
            f"({result.overflow} skipped)."
        )
    logger.info(
        f"Import {import_session.id} for user {user.id}: {len(result.chunks)} drafts "
        f"from {filename} ({result.total_found} found)"
    )
    return _session_response(import_session, message)


@router.get("/{import_id}", response_model=ImportSessionResponse)
async def get_import(
    import_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Get an import session with its current draft."""
    return _session_response(_load(session, user, import_id))


@router.patch("/{import_id}/draft", response_model=ImportSessionResponse)
async def update_draft(
    import_id: int,
    request: UpdateDraftRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Edit the current draft before approving or skipping it."""
    import_session = _load(session, user, import_id)
    try:
        triage_service.edit_draft(import_session, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    session.add(import_session)
    session.commit()
    session.refresh(import_session)
    return _session_response(import_session)


@router.post("/{import_id}/approve", response_model=ApproveResponse)
async def approve_draft(
    import_id: int,
    request: Optional[UpdateDraftRequest] = None,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """
    Save the current draft (with any final edits) as a card, then move on.

    The session only advances once the card has been written.
    """
    import_session = _load(session, user, import_id)
    changes = request.model_dump(exclude_unset=True) if request else None
    try:
        card = triage_service.approve(session, import_session, changes)
    except ValueError as e:
        session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    session.refresh(import_session)
    return ApproveResponse(
        card=CardResponse.model_validate(card),
        session=_session_response(import_session)
    )


@router.post("/{import_id}/skip", response_model=ImportSessionResponse)
async def skip_draft(
    import_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Discard the current draft and move on."""
    import_session = _load(session, user, import_id)
    triage_service.skip(import_session)
    session.add(import_session)
    session.commit()
    session.refresh(import_session)
    return _session_response(import_session)


@router.post("/{import_id}/reset", response_model=ImportSessionResponse)
async def reset_import(
    import_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Start over: drop the drafts and counters and return to upload."""
    import_session = _load(session, user, import_id)
    triage_service.reset(import_session)
    session.add(import_session)
    session.commit()
    session.refresh(import_session)
    return _session_response(import_session)
