import uuid
from datetime import date, datetime, timezone

import pytest

from review.data.models import ReviewItem
from review.domain.enums import ItemStatus, SourceType

TODAY = date(2024, 1, 10)
# 12:00 UTC is 21:00 KST, still 2024-01-10 locally
NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def owner_id():
    return uuid.uuid4()


@pytest.fixture
def make_item(owner_id):
    """Insert a review item directly, bypassing ingestion."""

    def _make(next_review_at=TODAY, box=1, course_id=None, status=ItemStatus.ACTIVE,
              source_type=SourceType.WRONG_NOTE, owner=None, created_at=None):
        fields = dict(
            owner_id=owner or owner_id,
            course_id=course_id,
            source_type=source_type,
            source_id=uuid.uuid4(),
            box=box,
            next_review_at=next_review_at,
            status=status,
        )
        if created_at is not None:
            fields["created_at"] = created_at
        return ReviewItem.objects.create(**fields)

    return _make
