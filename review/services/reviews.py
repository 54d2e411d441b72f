from functools import partial

from django.conf import settings
from django.utils import timezone
import structlog

from ..data.repos import get_item, set_status, update_schedule
from ..domain.enums import ItemStatus, LegacyRating
from ..domain.logic import advance, advance_legacy, parse_rating
from ..utils.time import local_today, to_kst_iso

logger = structlog.get_logger()


def legacy_ratings_enabled():
    return getattr(settings, "REVIEW_ACCEPT_LEGACY_RATINGS", False)


def rate_item(owner_id, item_id, rating, now=None, allow_legacy=None):
    if allow_legacy is None:
        allow_legacy = legacy_ratings_enabled()
    # Rejected before touching the store
    rating = parse_rating(rating, allow_legacy=allow_legacy)

    logger.info("review_received",
        owner_id=str(owner_id),
        item_id=str(item_id),
        rating=rating.value,
    )

    now = now or timezone.now()
    today = local_today(now)
    step = advance_legacy if rating == LegacyRating.UNSURE else advance
    transition = partial(step, rating=rating, today=today)

    # Serialize the read-modify-write per item
    item = update_schedule(owner_id, item_id, transition, reviewed_at=now)

    logger.info("review_scheduled",
        owner_id=str(owner_id),
        item_id=str(item.id),
        rating=rating.value,
        box=item.box,
        next_review_at=item.next_review_at.isoformat(),
        reviewed_kst=to_kst_iso(now),
    )
    return item


def get_review_item(owner_id, item_id):
    return get_item(owner_id, item_id)


def suspend_item(owner_id, item_id):
    item = set_status(owner_id, item_id, ItemStatus.SUSPENDED)
    logger.info("review_item_suspended", owner_id=str(owner_id), item_id=str(item.id))
    return item


def resume_item(owner_id, item_id):
    item = set_status(owner_id, item_id, ItemStatus.ACTIVE)
    logger.info("review_item_resumed", owner_id=str(owner_id), item_id=str(item.id))
    return item
