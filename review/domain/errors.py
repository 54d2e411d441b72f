class ReviewError(Exception):
    """Base class for review scheduler errors."""

    code = "review_error"


class NotFound(ReviewError):
    code = "not_found"

    def __init__(self, item_id):
        super().__init__(f"Review item {item_id} not found")
        self.item_id = item_id


class InvalidRating(ReviewError):
    code = "invalid_rating"

    def __init__(self, rating):
        super().__init__(f"Invalid rating: {rating!r}")
        self.rating = rating


class InvalidFilter(ReviewError):
    code = "invalid_filter"

    def __init__(self, value):
        super().__init__(f"Invalid queue filter: {value!r}")
        self.value = value


class StoreUnavailable(ReviewError):
    """The review item store could not be reached. Not retried automatically."""

    code = "store_unavailable"


class DuplicateActiveItem(ReviewError):
    code = "duplicate_active_item"

    def __init__(self, item_id, existing_id):
        super().__init__(
            f"Review item {item_id} cannot be resumed: {existing_id} is already active for the same source"
        )
        self.item_id = item_id
        self.existing_id = existing_id


class SessionComplete(ReviewError):
    code = "session_complete"

    def __init__(self):
        super().__init__("Review session is no longer in progress")
