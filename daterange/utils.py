from datetime import datetime, time, timedelta

from dateutil import tz
from tzlocal import get_localzone


def get_timezone_from_tz_string(tz_string):
    """Resolve a timezone name such as 'Europe/London' or 'UTC'.

    ``None`` and 'local' resolve to the machine's local zone.
    """
    if tz_string is None or "local" in tz_string.lower():
        return get_localzone()

    timezone = tz.gettz(tz_string)
    if timezone is None:
        raise ValueError("Unknown timezone: %r" % tz_string)
    return timezone


def localize_timezone(date_time, tz_string=None):
    """Attach a timezone to a naive value; aware values are returned unchanged.

    Plain dates are taken to be at midnight.
    """
    if not isinstance(date_time, datetime):
        date_time = datetime.combine(date_time, time())

    if date_time.tzinfo is not None and date_time.utcoffset() is not None:
        return date_time

    return date_time.replace(tzinfo=get_timezone_from_tz_string(tz_string))


def get_tz_identifier(date_time):
    """Best effort IANA identifier for an aware value, falling back to its abbreviation."""
    timezone = date_time.tzinfo
    key = getattr(timezone, "key", None) or getattr(timezone, "zone", None)
    if key:
        return key

    # dateutil's tzfile only remembers the path it was loaded from
    filename = getattr(timezone, "_filename", None) or ""
    if "zoneinfo/" in filename:
        return filename.rsplit("zoneinfo/", 1)[1]

    if date_time.utcoffset() == timedelta(0):
        return "UTC"
    return date_time.tzname() or "UTC"
