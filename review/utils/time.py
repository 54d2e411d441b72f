from datetime import timedelta, timezone as dt_tz

from django.utils import timezone

KST = dt_tz(timedelta(hours=9))


def to_kst_iso(dt_utc):
    return dt_utc.astimezone(KST).isoformat()


def local_today(now=None):
    """Calendar date of `now` (default: current time) in the configured TIME_ZONE."""
    return timezone.localdate(now)
