import uuid
from dataclasses import dataclass
from typing import Optional

from .enums import QueueFilterKind
from .errors import InvalidFilter


@dataclass(frozen=True)
class QueueFilter:
    kind: QueueFilterKind
    course_id: Optional[uuid.UUID] = None

    @property
    def includes_overdue(self) -> bool:
        return self.kind != QueueFilterKind.TODAY

    @property
    def includes_today(self) -> bool:
        return self.kind != QueueFilterKind.OVERDUE


def parse_queue_filter(value) -> QueueFilter:
    """`all`, `overdue`, `today`, or a course id (same as `all`, scoped to the course)."""
    if isinstance(value, QueueFilter):
        return value
    if value is None or value == "":
        return QueueFilter(QueueFilterKind.ALL)
    if isinstance(value, uuid.UUID):
        return QueueFilter(QueueFilterKind.COURSE, value)
    value = str(value).strip()
    if value in (QueueFilterKind.ALL, QueueFilterKind.OVERDUE, QueueFilterKind.TODAY):
        return QueueFilter(QueueFilterKind(value))
    try:
        return QueueFilter(QueueFilterKind.COURSE, uuid.UUID(value))
    except ValueError:
        raise InvalidFilter(value) from None
