from datetime import timedelta
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone


def now():
    return timezone.now()


def scheduler_timezone():
    name = getattr(settings, "SCHEDULER_TIME_ZONE", None)
    if name:
        return ZoneInfo(name)
    return timezone.get_default_timezone()


def add_calendar_days(dt, days, tz=None):
    """
    Add whole days on the wall clock of ``tz``, so 09:00 stays 09:00 across a
    DST change. The result keeps the zone of ``dt``.
    """
    if tz is None or dt.tzinfo is None:
        return dt + timedelta(days=days)
    local = dt.astimezone(tz) + timedelta(days=days)
    return local.astimezone(dt.tzinfo)


def to_local_iso(dt):
    if dt is None:
        return None
    return dt.astimezone(scheduler_timezone()).isoformat()
