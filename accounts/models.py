import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Learner account. The primary key is a UUID so it can be used directly as
    the owner id of review items.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
