import uuid
from datetime import timedelta

import pytest

from review.domain.errors import SessionComplete, StoreUnavailable
from review.services import session as session_module
from review.services.session import ReviewSession, SessionState

from .conftest import NOW, TODAY


@pytest.fixture
def four_due(make_item):
    return [make_item(next_review_at=TODAY - timedelta(days=n), box=3) for n in (3, 2, 1, 0)]


@pytest.mark.django_db
def test_full_session_produces_summary(owner_id, four_due):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)

    assert session.state == SessionState.IN_PROGRESS
    assert [i.id for i in session.items] == [i.id for i in four_due]

    for rating in ("know", "confused", "forgot", "again"):
        session.reveal()
        session.rate(rating, now=NOW)

    assert session.is_complete
    assert session.current_item is None
    assert session.summary.counts == {"know": 1, "confused": 1, "forgot": 1, "again": 1}
    assert session.summary.rollover_count == 3


@pytest.mark.django_db
def test_each_rating_is_persisted(owner_id, four_due):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)

    first = session.rate("know", now=NOW)

    first.refresh_from_db()
    assert first.box == 4
    assert first.next_review_at == TODAY + timedelta(days=14)
    assert first.last_reviewed_at == NOW


@pytest.mark.django_db
def test_reveal_does_not_advance(owner_id, four_due):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)

    shown = session.reveal()
    shown_again = session.reveal()

    assert shown.id == shown_again.id == four_due[0].id
    assert session.index == 0


@pytest.mark.django_db
def test_queue_snapshot_does_not_change_mid_session(owner_id, four_due, make_item):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)
    make_item(next_review_at=TODAY - timedelta(days=10))

    assert len(session.items) == 4
    assert session.remaining == 4


@pytest.mark.django_db
def test_empty_queue_completes_immediately(owner_id):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)

    assert session.is_complete
    assert session.summary.total == 0
    with pytest.raises(SessionComplete):
        session.rate("know", now=NOW)


@pytest.mark.django_db
def test_rating_after_completion_raises(owner_id, make_item):
    make_item(next_review_at=TODAY)
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)
    session.rate("know", now=NOW)

    with pytest.raises(SessionComplete):
        session.rate("know", now=NOW)


@pytest.mark.django_db
def test_failed_rating_keeps_current_card(owner_id, four_due, monkeypatch):
    real_rate_item = session_module.rate_item
    calls = {"n": 0}

    def flaky(*args, **kwargs):
        calls["n"] += 1
        if calls["n"] == 1:
            raise StoreUnavailable("database is locked")
        return real_rate_item(*args, **kwargs)

    monkeypatch.setattr(session_module, "rate_item", flaky)
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)

    with pytest.raises(StoreUnavailable):
        session.rate("forgot", now=NOW)
    assert session.index == 0
    assert session.current_item.id == four_due[0].id

    session.rate("forgot", now=NOW)
    assert session.index == 1
    assert len(session.results) == 1


@pytest.mark.django_db
def test_abandon_keeps_applied_ratings_without_summary(owner_id, four_due):
    session = ReviewSession.start(owner_id, "all", as_of=TODAY)
    session.rate("forgot", now=NOW)

    session.abandon()

    assert session.state == SessionState.ABANDONED
    assert session.summary is None
    four_due[0].refresh_from_db()
    assert four_due[0].box == 1
    with pytest.raises(SessionComplete):
        session.rate("know", now=NOW)


@pytest.mark.django_db
def test_session_respects_limit_and_course(owner_id, make_item):
    course_id = uuid.uuid4()
    for _ in range(3):
        make_item(next_review_at=TODAY, course_id=course_id)
    make_item(next_review_at=TODAY)

    session = ReviewSession.start(owner_id, str(course_id), as_of=TODAY, limit=2)

    assert len(session.items) == 2
    assert all(i.course_id == course_id for i in session.items)
