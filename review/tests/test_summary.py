import uuid

import pytest

from review.data.models import ReviewSessionRecord
from review.domain.errors import InvalidRating
from review.services.summary import RatingEvent, save_session_summary, summarize_session


def test_four_ratings_one_each():
    events = [RatingEvent(uuid.uuid4(), r) for r in ("know", "confused", "forgot", "again")]

    summary = summarize_session(events)

    assert summary.counts == {"know": 1, "confused": 1, "forgot": 1, "again": 1}
    assert summary.total == 4
    assert summary.rollover_count == 3


def test_empty_session():
    summary = summarize_session([])
    assert summary.counts == {"know": 0, "confused": 0, "forgot": 0, "again": 0}
    assert summary.rollover_count == 0


def test_all_known_has_no_rollover():
    summary = summarize_session([{"item_id": uuid.uuid4(), "rating": "know"}] * 3)
    assert summary.counts["know"] == 3
    assert summary.rollover_count == 0


def test_unknown_rating_rejected():
    with pytest.raises(InvalidRating):
        summarize_session(["know", "meh"])


def test_legacy_unsure_counted_only_when_allowed():
    with pytest.raises(InvalidRating):
        summarize_session(["unsure"])

    summary = summarize_session(["unsure", "know"], allow_legacy=True)
    assert summary.counts["unsure"] == 1
    assert summary.rollover_count == 1


@pytest.mark.django_db
def test_save_session_summary(owner_id):
    summary = summarize_session(["know", "know", "forgot"])

    record = save_session_summary(owner_id, summary)

    stored = ReviewSessionRecord.objects.get(pk=record.id)
    assert stored.owner_id == owner_id
    assert (stored.total, stored.know_count, stored.forgot_count) == (3, 2, 1)
    assert stored.rollover_count == 1
