__version__ = "1.0.0"

from .conf import apply_settings, Settings, SettingValidationError
from .date_range import DateRange
from .php_format import PhpDateTime, php_format

# Re-export format analysis helpers for convenience
from .date_format import (
    CHAR_SETS,
    ESCAPE_CHARACTER,
    TIME_PARTS,
    TimePart,
    get_time_part,
    get_time_part_aliases,
    get_time_part_characters,
    is_escaped_character,
    is_hour_minute_second,
    is_known_time_part_character,
    next_character_is_smaller_time_part,
    remove_smaller_time_part_characters,
    remove_time_part_aliases_from_format,
    remove_time_part_character_from_format,
    trim_format,
)


@apply_settings
def format_range(start_date, end_date, date_format, *, settings=None):
    """Format a pair of dates as a single range with duplicated time parts removed.

    :param start_date:
        Start of the range, a :class:`datetime.date`/:class:`datetime.datetime`
        or any object with a PHP style ``format()`` method.

    :param end_date:
        End of the range, same types as ``start_date``.

    :param date_format:
        A PHP ``date()`` format string as given
        `here <https://www.php.net/manual/en/datetime.format.php>`_, written
        for the end date. Time parts shared with the start date are removed
        from one side.
    :type date_format: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`daterange.conf.Settings`.
    :type settings: dict

    :return: The range, or a single date when both dates render the same.
    :rtype: str

    :raises:
        ``TypeError``: a date cannot be formatted,
        ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import daterange
        >>> from datetime import date
        >>> daterange.format_range(date(2018, 6, 18), date(2018, 6, 23), "jS F Y")
        '18th – 23rd June 2018'

        >>> daterange.format_range(date(2017, 6, 23), date(2018, 6, 23), "M Y")
        'Jun 2017 – Jun 2018'

        >>> daterange.format_range(
        ...     date(2018, 2, 6), date(2018, 2, 7), "d/n/y", settings={"SEPARATOR": " to "}
        ... )
        '06 to 07/2/18'
    """
    return DateRange(start_date, end_date, settings=settings).format(date_format)
