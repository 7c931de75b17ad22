"""
Tests for the import triage state machine.
"""
import pytest

from app.core.exceptions import EmptyDocumentError, InvalidTransitionError
from app.models.models import Card, CardStatus, ImportSession, ImportState, SourceType
from app.services import triage_service
from app.services.chunk_service import chunk_text

DOCUMENT = "\n\n".join([
    "Grace is the first paragraph of this study.",
    "Faith is the second paragraph of this study.",
    "Hope is the third paragraph of this study.",
])


def _started(user_id=1):
    import_session = ImportSession(user_id=user_id)
    triage_service.start(import_session, "Romans.md", chunk_text(DOCUMENT))
    return import_session


def test_start_moves_to_triage_on_first_draft():
    import_session = _started()

    assert import_session.state == ImportState.TRIAGE
    assert import_session.current_index == 0
    assert triage_service.current_draft(import_session)["body"].startswith("Grace")
    assert import_session.filename == "Romans.md"


def test_start_without_chunks_is_rejected():
    import_session = ImportSession(user_id=1)

    with pytest.raises(EmptyDocumentError):
        triage_service.start(import_session, "empty.txt", chunk_text("too short"))
    assert import_session.state == ImportState.UPLOAD


def test_skipping_every_draft_completes():
    import_session = _started()

    for _ in range(3):
        triage_service.skip(import_session)

    assert import_session.state == ImportState.COMPLETE
    assert import_session.skipped == 3
    assert import_session.approved == 0
    assert triage_service.current_draft(import_session) is None
    assert triage_service.progress(import_session) == 100


def test_disposition_after_complete_is_rejected():
    import_session = _started()
    for _ in range(3):
        triage_service.skip(import_session)

    with pytest.raises(InvalidTransitionError):
        triage_service.skip(import_session)


def test_edit_draft_changes_only_the_current_draft():
    import_session = _started()

    triage_service.edit_draft(import_session, {"title": "Grace", "scripture": "Eph 2:8", "category": "Rules"})

    draft = triage_service.current_draft(import_session)
    assert draft["title"] == "Grace"
    assert draft["scripture"] == "Eph 2:8"
    assert draft["category"] == "Rules"
    assert import_session.chunks[1]["category"] == "Studies"


def test_edit_draft_rejects_unprocessed_category():
    import_session = _started()

    with pytest.raises(ValueError):
        triage_service.edit_draft(import_session, {"category": "Unprocessed"})


def test_reset_returns_to_upload():
    import_session = _started()
    triage_service.skip(import_session)

    triage_service.reset(import_session)

    assert import_session.state == ImportState.UPLOAD
    assert import_session.chunks == []
    assert import_session.skipped == 0
    assert import_session.approved == 0
    assert import_session.total_found == 0
    assert import_session.filename == ""


def test_mixed_dispositions_sum_to_chunk_count(session, user):
    import_session = _started(user.id)
    session.add(import_session)
    session.commit()

    triage_service.approve(session, import_session)
    triage_service.skip(import_session)
    triage_service.approve(session, import_session)

    assert import_session.state == ImportState.COMPLETE
    assert import_session.approved + import_session.skipped == 3
    assert import_session.approved == 2


def test_approve_persists_card_with_import_defaults(session, user):
    import_session = _started(user.id)
    session.add(import_session)
    session.commit()

    card = triage_service.approve(session, import_session, {"title": "Grace alone"})

    stored = session.get(Card, card.id)
    assert stored.title == "Grace alone"
    assert stored.status == CardStatus.PROCESSED
    assert stored.source_type == SourceType.NOTE
    assert stored.source_title == "Romans"
    assert stored.user_id == user.id
    assert import_session.current_index == 1


def test_failed_approve_does_not_advance(session, user):
    import_session = _started(user.id)
    session.add(import_session)
    session.commit()

    with pytest.raises(ValueError):
        triage_service.approve(session, import_session, {"connected_topic_ids": [999]})
    session.rollback()

    assert import_session.current_index == 0
    assert import_session.approved == 0
