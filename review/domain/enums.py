from django.db import models


class Rating(models.TextChoices):
    KNOW = "know", "알고있음"
    CONFUSED = "confused", "헷갈림"
    FORGOT = "forgot", "모름"
    AGAIN = "again", "다시 보기"


class LegacyRating(models.TextChoices):
    """Three-outcome vocabulary of the dashboard review flow."""

    KNOW = "know", "알고있음"
    UNSURE = "unsure", "헷갈림"
    FORGOT = "forgot", "모름"


class SourceType(models.TextChoices):
    WRONG_NOTE = "wrong_note", "오답노트"
    FLASHCARD = "flashcard", "암기카드"


class ItemStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    SUSPENDED = "suspended", "Suspended"


class QueueFilterKind(models.TextChoices):
    ALL = "all", "오늘 + 기한 초과"
    OVERDUE = "overdue", "기한 초과만"
    TODAY = "today", "오늘 복습만"
    COURSE = "course", "과목별 필터"


RATING_LABELS = {
    **{r.value: r.label for r in Rating},
    LegacyRating.UNSURE.value: LegacyRating.UNSURE.label,
}
