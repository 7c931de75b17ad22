"""
Tests for UTC timestamps on stored rows.
"""
from datetime import datetime, timedelta, timezone

from app.models.models import Card, ImportSession, Topic, User
from app.services import card_service
from app.utils.time_utils import as_utc, utc_now


def test_utc_now_is_aware():
    assert utc_now().tzinfo is not None
    assert utc_now().utcoffset() == timedelta(0)


def test_as_utc_attaches_utc_to_naive_values():
    naive = datetime(2026, 1, 2, 3, 4, 5)

    assert as_utc(naive) == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_as_utc_converts_other_offsets():
    eastern = datetime(2026, 1, 2, 3, 0, tzinfo=timezone(timedelta(hours=-5)))

    assert as_utc(eastern) == datetime(2026, 1, 2, 8, 0, tzinfo=timezone.utc)


def test_model_defaults_are_aware():
    for row in (User(email="a@example.com", password="x"), Card(user_id=1, title="t"),
                Topic(user_id=1, number="1", title="t"), ImportSession(user_id=1)):
        assert row.created_at.tzinfo is not None


def test_rows_with_timestamps_can_be_written(session, user):
    before = utc_now()

    card = card_service.create_card(session, user.id, title="Written with a UTC timestamp")

    stored = session.get(Card, card.id)
    assert stored is not None
    assert as_utc(stored.created_at) >= before - timedelta(seconds=1)
