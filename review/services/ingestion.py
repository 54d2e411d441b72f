from django.utils import timezone
import structlog

from ..data.repos import create_item, find_active
from ..domain.enums import SourceType
from ..utils.time import local_today

logger = structlog.get_logger()


def register_review_item(owner_id, course_id, source_type, source_id, now=None):
    """
    Idempotently register a review item for an external fact.

    Returns (item, created). Repeated calls for the same
    (owner, source_type, source_id) return the existing active item unchanged.
    """
    source_type = SourceType(source_type)

    # Fast path: already registered
    existing = find_active(owner_id, source_type, source_id)
    if existing:
        logger.info("review_item_reused",
            owner_id=str(owner_id),
            item_id=str(existing.id),
            source_type=source_type.value,
            source_id=str(source_id),
        )
        return existing, False

    # created_at and the first due date come from the same instant
    now = now or timezone.now()
    item, created = create_item(
        owner_id, course_id, source_type, source_id, local_today(now), created_at=now
    )

    logger.info("review_item_registered" if created else "review_item_race_absorbed",
        owner_id=str(owner_id),
        item_id=str(item.id),
        course_id=str(course_id) if course_id else None,
        source_type=source_type.value,
        source_id=str(source_id),
        next_review_at=item.next_review_at.isoformat(),
    )
    return item, created


def register_wrong_answer(owner_id, course_id, wrong_note_id, now=None):
    """Called by quiz grading once per wrong answer."""
    return register_review_item(owner_id, course_id, SourceType.WRONG_NOTE, wrong_note_id, now)


def register_flashcard(owner_id, course_id, flashcard_id, now=None):
    """Called by flashcard generation once per card."""
    return register_review_item(owner_id, course_id, SourceType.FLASHCARD, flashcard_id, now)
