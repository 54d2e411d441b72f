# Django discovers models through <app>.models
from .data.models import ReviewItem, ReviewSessionRecord  # noqa: F401
