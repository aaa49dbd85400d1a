"""
PHP ``date()`` style rendering for Python dates.

``DateRange`` only needs its dates to expose ``format(pattern) -> str``.
Python's ``date`` and ``datetime`` don't, so they are wrapped in
``PhpDateTime``, which renders the PHP 7 format character table in English:
https://www.php.net/manual/en/datetime.format.php

A backslash makes the next character literal and any character without a
meaning is passed through unchanged.
"""

import calendar
from datetime import date, timedelta

import regex as re

from daterange.conf import apply_settings
from daterange.utils import get_tz_identifier, localize_timezone

RE_FORMAT_TOKEN = re.compile(r"\\(.?)|(.)", flags=re.S)

DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

ISO_8601_FORMAT = "Y-m-d\\TH:i:sP"
RFC_2822_FORMAT = "D, d M Y H:i:s O"


def ordinal_suffix(day):
    """English ordinal suffix for a day of the month: st, nd, rd or th."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _twelve_hour(dt):
    return dt.hour % 12 or 12


def _utc_offset(dt, separator=""):
    offset = dt.utcoffset() or timedelta(0)
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return "%s%02d%s%02d" % (sign, hours, separator, minutes)


def _swatch_beat(dt):
    # Biel Mean Time is UTC+1
    utc = dt - (dt.utcoffset() or timedelta(0))
    seconds = (utc.hour * 3600 + utc.minute * 60 + utc.second + 3600) % 86400
    return "%03d" % int(seconds / 86.4)


def _is_dst(dt):
    dst = dt.dst()
    return "1" if dst else "0"


CHARACTER_RENDERERS = {
    # Day
    "d": lambda dt: "%02d" % dt.day,
    "D": lambda dt: DAY_NAMES[dt.weekday()][:3],
    "j": lambda dt: str(dt.day),
    "l": lambda dt: DAY_NAMES[dt.weekday()],
    "N": lambda dt: str(dt.isoweekday()),
    "S": lambda dt: ordinal_suffix(dt.day),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    # Week
    "W": lambda dt: "%02d" % dt.isocalendar()[1],
    # Month
    "F": lambda dt: MONTH_NAMES[dt.month - 1],
    "m": lambda dt: "%02d" % dt.month,
    "M": lambda dt: MONTH_NAMES[dt.month - 1][:3],
    "n": lambda dt: str(dt.month),
    "t": lambda dt: str(calendar.monthrange(dt.year, dt.month)[1]),
    # Year
    "L": lambda dt: "1" if calendar.isleap(dt.year) else "0",
    "o": lambda dt: str(dt.isocalendar()[0]),
    "Y": lambda dt: "%04d" % dt.year,
    "y": lambda dt: "%02d" % (dt.year % 100),
    # Time
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "B": _swatch_beat,
    "g": lambda dt: str(_twelve_hour(dt)),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: "%02d" % _twelve_hour(dt),
    "H": lambda dt: "%02d" % dt.hour,
    "i": lambda dt: "%02d" % dt.minute,
    "s": lambda dt: "%02d" % dt.second,
    "u": lambda dt: "%06d" % dt.microsecond,
    "v": lambda dt: "%03d" % (dt.microsecond // 1000),
    # Timezone
    "e": get_tz_identifier,
    "I": _is_dst,
    "O": _utc_offset,
    "P": lambda dt: _utc_offset(dt, ":"),
    "T": lambda dt: dt.tzname() or _utc_offset(dt, ":"),
    "Z": lambda dt: str(int((dt.utcoffset() or timedelta(0)).total_seconds())),
    # Full date/time
    "c": lambda dt: render(dt, ISO_8601_FORMAT),
    "r": lambda dt: render(dt, RFC_2822_FORMAT),
    "U": lambda dt: str(int(dt.timestamp())),
}


def render(date_time, date_format):
    """Render an aware ``datetime`` with a PHP format string."""
    output = []
    for match in RE_FORMAT_TOKEN.finditer(date_format):
        escaped, character = match.groups()
        if character is None:
            # A trailing backslash has nothing to escape and renders as itself
            output.append(escaped or "\\")
            continue
        renderer = CHARACTER_RENDERERS.get(character)
        output.append(renderer(date_time) if renderer else character)
    return "".join(output)


@apply_settings
def php_format(value, date_format, *, settings=None):
    """Render a ``date`` or ``datetime`` with a PHP format string.

    Naive values are taken to be in ``settings.TIMEZONE``.
    """
    return render(localize_timezone(value, settings.TIMEZONE), date_format)


class PhpDateTime:
    """
    A date value that renders itself with PHP format strings.

    :param value:
        The date to wrap. Naive values are localized to ``settings.TIMEZONE``,
        or the machine's local timezone when that is unset.
    :type value: :class:`datetime.date` or :class:`datetime.datetime`

    :param settings:
        Configure customized behavior using settings defined in :mod:`daterange.conf.Settings`.
    :type settings: dict
    """

    @apply_settings
    def __init__(self, value, *, settings=None):
        if not isinstance(value, date):
            raise TypeError(
                "value must be a date or datetime (%r given)" % type(value)
            )
        self.value = localize_timezone(value, settings.TIMEZONE)

    def format(self, date_format):
        return render(self.value, date_format)

    def __eq__(self, other):
        if not isinstance(other, PhpDateTime):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.value)
