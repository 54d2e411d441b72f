from dataclasses import dataclass
from datetime import date, timedelta

from .enums import LegacyRating, Rating
from .errors import InvalidRating
from ..config import (
    AGAIN_RETEST_BOX,
    CONFUSED_RETEST_BOX,
    LEITNER_INTERVAL_DAYS,
    MAX_BOX,
    MIN_BOX,
)


@dataclass(frozen=True)
class ScheduleResult:
    new_box: int
    next_review_at: date


def clamp_box(box: int) -> int:
    return max(MIN_BOX, min(int(box), MAX_BOX))


def interval_for(box: int) -> timedelta:
    return timedelta(days=LEITNER_INTERVAL_DAYS[clamp_box(box)])


def parse_rating(value, allow_legacy: bool = False):
    """
    Map a raw rating value onto Rating, or LegacyRating.UNSURE when the
    legacy vocabulary is accepted. Anything else raises InvalidRating.
    """
    if isinstance(value, (Rating, LegacyRating)):
        value = value.value
    if value in Rating.values:
        return Rating(value)
    if allow_legacy and value == LegacyRating.UNSURE:
        return LegacyRating.UNSURE
    raise InvalidRating(value)


def advance(current_box: int, rating, today: date) -> ScheduleResult:
    """
    Leitner transition for the four-outcome session vocabulary.

    know      -> one box up, interval of the new box
    confused  -> same box, fixed 3-day re-test
    forgot    -> back to box 1, next day
    again     -> same box, next day
    """
    rating = parse_rating(rating)
    box = clamp_box(current_box)

    if rating == Rating.KNOW:
        new_box = clamp_box(box + 1)
        return ScheduleResult(new_box, today + interval_for(new_box))
    if rating == Rating.CONFUSED:
        return ScheduleResult(box, today + interval_for(CONFUSED_RETEST_BOX))
    if rating == Rating.FORGOT:
        return ScheduleResult(MIN_BOX, today + interval_for(AGAIN_RETEST_BOX))
    # Rating.AGAIN
    return ScheduleResult(box, today + interval_for(AGAIN_RETEST_BOX))


def advance_legacy(current_box: int, rating, today: date) -> ScheduleResult:
    """
    Transition for the three-outcome dashboard vocabulary (know/unsure/forgot),
    where every interval comes from the box table.
    """
    if isinstance(rating, (Rating, LegacyRating)):
        rating = rating.value
    if rating not in LegacyRating.values:
        raise InvalidRating(rating)
    box = clamp_box(current_box)

    if rating == LegacyRating.KNOW:
        new_box = clamp_box(box + 1)
        return ScheduleResult(new_box, today + interval_for(new_box))
    if rating == LegacyRating.UNSURE:
        return ScheduleResult(box, today + interval_for(box))
    return ScheduleResult(MIN_BOX, today + interval_for(MIN_BOX))
