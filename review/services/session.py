"""
Review session orchestration.

A session snapshots the due queue once, then walks it one item at a time:
each rating goes through the Leitner scheduler and is committed on its own,
so abandoning a session never needs compensation.
"""
from enum import Enum

import structlog

from ..domain.errors import SessionComplete
from .queue import build_queue
from .reviews import legacy_ratings_enabled, rate_item
from .summary import RatingEvent, summarize_session

logger = structlog.get_logger()


class SessionState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    ABANDONED = "abandoned"


class ReviewSession:
    def __init__(self, owner_id, items, allow_legacy=None):
        self.owner_id = owner_id
        self.items = list(items)
        self.allow_legacy = legacy_ratings_enabled() if allow_legacy is None else allow_legacy
        self.index = 0
        self.results = []
        self.summary = None
        self.state = SessionState.IN_PROGRESS
        if not self.items:
            self._complete()

    @classmethod
    def start(cls, owner_id, queue_filter="all", as_of=None, limit=None, allow_legacy=None):
        items = build_queue(owner_id, queue_filter, as_of=as_of, limit=limit)
        logger.info("review_session_started", owner_id=str(owner_id), item_count=len(items))
        return cls(owner_id, items, allow_legacy=allow_legacy)

    @property
    def is_complete(self):
        return self.state == SessionState.COMPLETE

    @property
    def remaining(self):
        return len(self.items) - self.index

    @property
    def current_item(self):
        if self.state != SessionState.IN_PROGRESS:
            return None
        return self.items[self.index]

    def reveal(self):
        """Show the answer side of the current card. Advisory only."""
        return self.current_item

    def rate(self, rating, now=None):
        """
        Apply `rating` to the current item and move to the next one.

        If the store call fails the index does not move, so the same card can
        be rated again.
        """
        if self.state != SessionState.IN_PROGRESS:
            raise SessionComplete()

        item = self.items[self.index]
        updated = rate_item(
            self.owner_id, item.id, rating, now=now, allow_legacy=self.allow_legacy
        )
        self.items[self.index] = updated
        self.results.append(RatingEvent(item_id=item.id, rating=str(getattr(rating, "value", rating))))
        self.index += 1

        if self.index >= len(self.items):
            self._complete()
        return updated

    def abandon(self):
        """Drop the session. Ratings already applied stay committed."""
        if self.state == SessionState.IN_PROGRESS:
            logger.info("review_session_abandoned",
                owner_id=str(self.owner_id),
                rated=self.index,
                remaining=self.remaining,
            )
            self.state = SessionState.ABANDONED

    def _complete(self):
        self.state = SessionState.COMPLETE
        self.summary = summarize_session(self.results, allow_legacy=self.allow_legacy)
        logger.info("review_session_complete",
            owner_id=str(self.owner_id),
            total=self.summary.total,
            rollover_count=self.summary.rollover_count,
        )
