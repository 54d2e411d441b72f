import functools
import uuid

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, Q
from django.utils import timezone

from ..domain.enums import ItemStatus, QueueFilterKind
from ..domain.errors import DuplicateActiveItem, NotFound, StoreUnavailable
from .models import ReviewItem, ReviewSessionRecord


def _store_call(fn):
    """Surface driver failures as StoreUnavailable; constraint errors pass through."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except IntegrityError:
            raise
        except DatabaseError as exc:
            raise StoreUnavailable(str(exc)) from exc

    return wrapper


def _owned(owner_id):
    return ReviewItem.objects.filter(owner_id=owner_id)


def _item_pk(item_id):
    """A malformed id cannot resolve to any row."""
    try:
        return item_id if isinstance(item_id, uuid.UUID) else uuid.UUID(str(item_id))
    except ValueError:
        raise NotFound(item_id) from None


@_store_call
def get_item(owner_id, item_id):
    try:
        return _owned(owner_id).get(pk=_item_pk(item_id))
    except ReviewItem.DoesNotExist:
        raise NotFound(item_id) from None


@_store_call
def find_active(owner_id, source_type, source_id):
    return _owned(owner_id).filter(
        source_type=source_type, source_id=source_id, status=ItemStatus.ACTIVE
    ).first()


@_store_call
def create_item(owner_id, course_id, source_type, source_id, next_review_at, created_at=None):
    """
    Insert a new active item. If a concurrent registration for the same source
    won the race, return the existing row instead.
    """
    try:
        with transaction.atomic():
            return ReviewItem.objects.create(
                owner_id=owner_id, course_id=course_id,
                source_type=source_type, source_id=source_id,
                next_review_at=next_review_at, status=ItemStatus.ACTIVE,
                created_at=created_at or timezone.now(),
            ), True
    except IntegrityError:
        existing = find_active(owner_id, source_type, source_id)
        if existing is None:
            raise
        return existing, False


@_store_call
def update_schedule(owner_id, item_id, transition, reviewed_at):
    """
    Lock the item row, compute the next schedule from its current box and
    write it back in the same transaction.
    """
    with transaction.atomic():
        try:
            item = _owned(owner_id).select_for_update().get(pk=_item_pk(item_id))
        except ReviewItem.DoesNotExist:
            raise NotFound(item_id) from None

        result = transition(item.box)
        item.box = result.new_box
        item.next_review_at = result.next_review_at
        item.last_reviewed_at = reviewed_at
        item.save(update_fields=["box", "next_review_at", "last_reviewed_at"])
    return item


@_store_call
def set_status(owner_id, item_id, status):
    try:
        with transaction.atomic():
            try:
                item = _owned(owner_id).select_for_update().get(pk=_item_pk(item_id))
            except ReviewItem.DoesNotExist:
                raise NotFound(item_id) from None
            if item.status == status:
                return item

            if status == ItemStatus.ACTIVE:
                existing = find_active(owner_id, item.source_type, item.source_id)
                if existing is not None:
                    raise DuplicateActiveItem(item.pk, existing.pk)

            item.status = status
            item.save(update_fields=["status"])
            return item
    except IntegrityError:
        # Another active item for the same source was registered meanwhile
        existing = find_active(owner_id, item.source_type, item.source_id)
        raise DuplicateActiveItem(item_id, existing.pk if existing else None) from None


def _due_queryset(owner_id, queue_filter, as_of):
    qs = _owned(owner_id).filter(status=ItemStatus.ACTIVE)
    if queue_filter.kind == QueueFilterKind.OVERDUE:
        qs = qs.filter(next_review_at__lt=as_of)
    elif queue_filter.kind == QueueFilterKind.TODAY:
        qs = qs.filter(next_review_at=as_of)
    else:
        qs = qs.filter(next_review_at__lte=as_of)
    if queue_filter.kind == QueueFilterKind.COURSE:
        qs = qs.filter(course_id=queue_filter.course_id)
    return qs


@_store_call
def query_due(owner_id, queue_filter, as_of, limit):
    qs = _due_queryset(owner_id, queue_filter, as_of)
    return list(qs.order_by("next_review_at", "created_at", "id")[:limit])


@_store_call
def count_by_due(owner_id, as_of):
    return _owned(owner_id).filter(status=ItemStatus.ACTIVE).aggregate(
        overdue_count=Count("id", filter=Q(next_review_at__lt=as_of)),
        today_count=Count("id", filter=Q(next_review_at=as_of)),
        upcoming_count=Count("id", filter=Q(next_review_at__gt=as_of)),
        total_active=Count("id"),
    )


@_store_call
def create_session_record(owner_id, summary, completed_at):
    counts = summary.counts
    return ReviewSessionRecord.objects.create(
        owner_id=owner_id,
        total=summary.total,
        know_count=counts.get("know", 0),
        confused_count=counts.get("confused", 0),
        forgot_count=counts.get("forgot", 0),
        again_count=counts.get("again", 0),
        unsure_count=counts.get("unsure", 0),
        rollover_count=summary.rollover_count,
        completed_at=completed_at,
    )
