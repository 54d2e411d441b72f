import uuid

from django.db import models
from django.db.models import Q
from django.utils import timezone

from ..config import MAX_BOX, MIN_BOX
from ..domain.enums import ItemStatus, SourceType


class ReviewItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.UUIDField()
    course_id = models.UUIDField(null=True, blank=True)
    source_type = models.CharField(max_length=16, choices=SourceType.choices)
    source_id = models.UUIDField()
    box = models.PositiveSmallIntegerField(default=MIN_BOX)
    next_review_at = models.DateField()  # local (KST) calendar date
    last_reviewed_at = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=16, choices=ItemStatus.choices, default=ItemStatus.ACTIVE
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "review_item"
        constraints = [
            models.UniqueConstraint(
                fields=["owner_id", "source_type", "source_id"],
                condition=Q(status=ItemStatus.ACTIVE),
                name="uniq_active_review_item_per_source",
            ),
            models.CheckConstraint(
                condition=Q(box__gte=MIN_BOX) & Q(box__lte=MAX_BOX),
                name="review_item_box_range",
            ),
        ]
        indexes = [
            models.Index(fields=["owner_id", "status", "next_review_at"], name="review_item_owner_due_idx"),
            models.Index(fields=["owner_id", "course_id"], name="review_item_owner_course_idx"),
        ]

    def __str__(self):
        return f"{self.source_type}:{self.source_id} box={self.box} due={self.next_review_at}"


class ReviewSessionRecord(models.Model):
    """A session summary the learner chose to keep."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.UUIDField()
    total = models.PositiveIntegerField()
    know_count = models.PositiveIntegerField(default=0)
    confused_count = models.PositiveIntegerField(default=0)
    forgot_count = models.PositiveIntegerField(default=0)
    again_count = models.PositiveIntegerField(default=0)
    unsure_count = models.PositiveIntegerField(default=0)
    rollover_count = models.PositiveIntegerField(default=0)
    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "review_session_record"
        indexes = [
            models.Index(fields=["owner_id", "completed_at"], name="review_session_owner_idx"),
        ]
