from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from django.utils import timezone
import structlog

from ..data.repos import create_session_record
from ..domain.enums import LegacyRating, Rating
from ..domain.logic import parse_rating

logger = structlog.get_logger()


@dataclass(frozen=True)
class RatingEvent:
    item_id: object
    rating: str


@dataclass(frozen=True)
class SessionSummary:
    counts: Dict[str, int] = field(default_factory=dict)
    total: int = 0
    rollover_count: int = 0

    def as_dict(self):
        return {
            "counts": dict(self.counts),
            "total": self.total,
            "rollover_count": self.rollover_count,
        }


def _rating_of(entry):
    if isinstance(entry, RatingEvent):
        return entry.rating
    if isinstance(entry, dict):
        return entry.get("rating")
    return entry


def summarize_session(ratings, allow_legacy=False) -> SessionSummary:
    """
    Tally the ratings of a completed session. Every rating other than `know`
    rolls the item into an earlier review.

    `ratings` may hold RatingEvent objects, {"item_id", "rating"} dicts or bare
    rating values.
    """
    tally = Counter(
        parse_rating(_rating_of(entry), allow_legacy=allow_legacy).value
        for entry in ratings
    )
    counts = {r.value: tally.get(r.value, 0) for r in Rating}
    if tally.get(LegacyRating.UNSURE.value):
        counts[LegacyRating.UNSURE.value] = tally[LegacyRating.UNSURE.value]

    total = sum(tally.values())
    return SessionSummary(
        counts=counts,
        total=total,
        rollover_count=total - counts[Rating.KNOW.value],
    )


def save_session_summary(owner_id, summary: SessionSummary, completed_at=None):
    record = create_session_record(owner_id, summary, completed_at or timezone.now())
    logger.info("review_session_saved",
        owner_id=str(owner_id),
        record_id=str(record.id),
        total=summary.total,
        rollover_count=summary.rollover_count,
    )
    return record
