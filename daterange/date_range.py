import logging
from datetime import date

from daterange.conf import apply_settings
from daterange.date_format import (
    get_time_part_characters,
    next_character_is_smaller_time_part,
    remove_smaller_time_part_characters,
    remove_time_part_character_from_format,
    trim_format,
)
from daterange.php_format import PhpDateTime

logger = logging.getLogger(__name__)


class DateRange:
    """
    Display a range of dates, with consolidated time parts.

    :param start_date:
        Start of the range. Either a :class:`datetime.date` /
        :class:`datetime.datetime`, or any object with a
        ``format(date_format) -> str`` method following PHP ``date()`` format
        characters.

    :param end_date:
        End of the range, same types as ``start_date``.

    :param settings:
        Configure customized behavior using settings defined in :mod:`daterange.conf.Settings`.
    :type settings: dict

    :raises:
        ``TypeError``: a date is missing or cannot be formatted,
        ``SettingValidationError``: A provided setting is not valid.

    The dates are fixed for the lifetime of the instance. Concurrent calls to
    :meth:`format` are safe as long as the separator and removable delimiters
    are not changed at the same time; the setters are not synchronised.
    Use :meth:`consolidate_date_formats` to inspect the derived formats.
    """

    @apply_settings
    def __init__(self, start_date, end_date, *, settings=None):
        self._settings = settings
        self._start_date = self._get_formattable_date(start_date, "start_date")
        self._end_date = self._get_formattable_date(end_date, "end_date")

        self.separator = settings.SEPARATOR
        self.removable_delimiters = settings.REMOVABLE_DELIMITERS
        self.escape_aware_stripping = settings.ESCAPE_AWARE_STRIPPING

    @property
    def start_date(self):
        return self._start_date

    @property
    def end_date(self):
        return self._end_date

    def set_separator(self, separator):
        """Change the separator between the start and end date."""
        if not isinstance(separator, str):
            raise TypeError("separator must be str (%r given)" % type(separator))
        self.separator = separator

    def set_removable_delimiters(self, removable_delimiters):
        """
        Change the delimiters that should be trimmed from the consolidated format ends.

        Avoids a format of ``d/M/Y`` having a start format of ``d//`` when month
        and year are consolidated. Accepts a string or any iterable of characters.
        """
        if not isinstance(removable_delimiters, str):
            removable_delimiters = "".join(removable_delimiters)
        self.removable_delimiters = removable_delimiters

    def format(self, end_date_format):
        """
        Format the date range.

        Time parts are consolidated, starting with the largest time part, so
        start and end dates in the same year don't show the year for the start date::

            14th May – 5th June 2018

        If the year and the month are the same, neither is shown for the start date::

            14th – 15th May 2018

        This continues for the day of the month, hours, minutes and seconds, and
        works when the format is not in size order::

            Jun 23rd – 28th 2018

        :param end_date_format:
            Date format as per https://www.php.net/manual/en/datetime.format.php
        :type end_date_format: str

        :return: The date range, or a single date when both dates render the same.
        :rtype: str
        """
        if self._formatted_dates_match(end_date_format):
            logger.debug("Dates render the same for %r, returning a single date", end_date_format)
            return self._end_date.format(end_date_format)

        start_format, end_format = self.consolidate_date_formats(end_date_format.strip())

        return (
            self._start_date.format(start_format)
            + self.separator
            + self._end_date.format(end_format)
        )

    def consolidate_date_formats(self, date_format):
        """
        Split a format into start and end date formats with duplicated time parts removed.

        Which side loses a time part depends on the order of different sized
        time parts in the format.

        :return: (start_format, end_format)
        :rtype: tuple
        """
        start_format = end_format = date_format
        time_part_characters = get_time_part_characters(date_format)

        for index, time_part_character in enumerate(time_part_characters):
            if not self._time_part_value_in_dates_is_consistent(
                time_part_characters, time_part_character
            ):
                continue

            if next_character_is_smaller_time_part(time_part_characters, index):
                logger.debug("Removing %r from the end date format", time_part_character)
                end_format = remove_time_part_character_from_format(
                    time_part_character, end_format, self.escape_aware_stripping
                )
            else:
                logger.debug("Removing %r from the start date format", time_part_character)
                start_format = remove_time_part_character_from_format(
                    time_part_character, start_format, self.escape_aware_stripping
                )

        start_format = trim_format(start_format, self.removable_delimiters)
        end_format = trim_format(end_format, self.removable_delimiters)
        logger.debug("Consolidated %r into %r and %r", date_format, start_format, end_format)
        return start_format, end_format

    def _formatted_dates_match(self, date_format):
        return self._start_date.format(date_format) == self._end_date.format(date_format)

    def _time_part_value_in_dates_is_consistent(self, time_part_characters, time_part_character):
        """Check if a time part and all larger ones render the same in both dates (i.e. Feb 2018 and Feb 2018).

        Each part is compared on its own, since concatenated renderings can
        collide: 1 Nov and 11 Jan both render "111" with "jn".
        """
        return all(
            self._formatted_dates_match(character)
            for character in remove_smaller_time_part_characters(
                time_part_characters, time_part_character
            )
        )

    def _get_formattable_date(self, value, name):
        if isinstance(value, date):
            return PhpDateTime(value, settings=self._settings)

        if value is None or isinstance(value, (str, bytes)) or not callable(
            getattr(value, "format", None)
        ):
            raise TypeError(
                "%s must be a date, datetime or have a format() method (%r given)"
                % (name, type(value))
            )
        return value

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self._start_date, self._end_date)
