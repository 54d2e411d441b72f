from django.conf import settings
import structlog

from ..config import DASHBOARD_TOP_ITEMS, DEFAULT_QUEUE_LIMIT, MAX_QUEUE_LIMIT
from ..data.repos import count_by_due, query_due
from ..domain.enums import QueueFilterKind
from ..domain.filters import QueueFilter, parse_queue_filter
from ..utils.time import local_today

logger = structlog.get_logger()


def default_queue_limit():
    return getattr(settings, "REVIEW_QUEUE_DEFAULT_LIMIT", DEFAULT_QUEUE_LIMIT)


def build_queue(owner_id, queue_filter="all", as_of=None, limit=None):
    """
    Due items for a session, oldest-due first (ties by creation time).

    queue_filter: "all" (overdue + today), "overdue", "today", or a course id.
    """
    queue_filter = parse_queue_filter(queue_filter)
    as_of = as_of or local_today()
    if limit is None:
        limit = default_queue_limit()
    # A non-positive limit asks for nothing
    limit = max(0, min(int(limit), MAX_QUEUE_LIMIT))

    items = query_due(owner_id, queue_filter, as_of, limit) if limit else []

    logger.info("review_queue_built",
        owner_id=str(owner_id),
        filter=queue_filter.kind.value,
        course_id=str(queue_filter.course_id) if queue_filter.course_id else None,
        as_of=as_of.isoformat(),
        limit=limit,
        item_count=len(items),
    )
    return items


def get_review_summary_counts(owner_id, as_of=None):
    """
    Dashboard widget data: overdue, due today, upcoming and all active items,
    plus the first few due items in queue order under `top_items`.
    """
    as_of = as_of or local_today()
    counts = count_by_due(owner_id, as_of)
    logger.info("review_counts", owner_id=str(owner_id), as_of=as_of.isoformat(), **counts)
    counts["top_items"] = query_due(
        owner_id, QueueFilter(QueueFilterKind.ALL), as_of, DASHBOARD_TOP_ITEMS
    )
    return counts
