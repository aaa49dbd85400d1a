"""
Format analysis for date ranges.

Works on PHP ``date()`` style format strings, where each character either
renders a part of the date (``Y`` is a four digit year, ``M`` a short month
name, ``j`` the day of the month and so on), is passed through literally, or
is escaped with a backslash.

Time part characters are grouped into character sets, ordered from the
largest time part to the smallest. Characters in the same set are aliases:
a month might be rendered as March, Mar, 3 or 03, but it is still a month.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import regex as re

ESCAPE_CHARACTER = "\\"


class TimePart(Enum):
    """Time parts, from largest to smallest."""
    YEAR = 0
    MONTH = 1
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5


# As per https://www.php.net/manual/en/datetime.format.php
CHAR_SETS: Tuple[Tuple[TimePart, Tuple[str, ...]], ...] = (
    (TimePart.YEAR, ("o", "Y", "y")),
    (TimePart.MONTH, ("F", "m", "M", "n")),
    (TimePart.DAY, ("d", "j")),
    (TimePart.HOUR, ("g", "G", "h", "H")),
    (TimePart.MINUTE, ("i",)),
    (TimePart.SECOND, ("s",)),
)

TIME_PARTS = frozenset({TimePart.HOUR, TimePart.MINUTE, TimePart.SECOND})

_TIME_PART_BY_CHARACTER = {
    character: time_part
    for time_part, aliases in CHAR_SETS
    for character in aliases
}
_ALIASES_BY_TIME_PART = dict(CHAR_SETS)


def get_time_part(character: str) -> Optional[TimePart]:
    """Return the time part a format character renders, or None for literals."""
    return _TIME_PART_BY_CHARACTER.get(character)


def is_known_time_part_character(character: str) -> bool:
    return character in _TIME_PART_BY_CHARACTER


def is_hour_minute_second(character: str) -> bool:
    """Determine if a character is an hour, minute or second time part character."""
    return get_time_part(character) in TIME_PARTS


def is_escaped_character(characters: Sequence[str], index: int) -> bool:
    """
    Check if the character at ``index`` is escaped.

    Only the immediately preceding character is looked at, so in ``\\\\Y`` the
    ``Y`` still counts as escaped even though PHP would render a literal
    backslash followed by the year.
    """
    return index >= 1 and characters[index - 1] == ESCAPE_CHARACTER


def get_time_part_characters(date_format: str) -> List[str]:
    """
    Known time part characters of a format, in order of first appearance.

    Escaped characters are skipped and each character is only listed once.
    """
    characters = list(date_format)
    sanitized = []
    for index, character in enumerate(characters):
        if not is_known_time_part_character(character):
            continue
        if is_escaped_character(characters, index):
            continue
        if character not in sanitized:
            sanitized.append(character)
    return sanitized


def next_character_is_smaller_time_part(
    time_part_characters: Sequence[str], index: int
) -> bool:
    """
    Determine if the character after ``index`` represents the same or a smaller time part.

    Returns False for the last character, since there is nothing after it.
    """
    if index + 1 >= len(time_part_characters):
        return False

    current = get_time_part(time_part_characters[index])
    following = get_time_part(time_part_characters[index + 1])
    return current.value <= following.value


def remove_smaller_time_part_characters(
    time_part_characters: Sequence[str], time_part_character: str
) -> List[str]:
    """
    Given a time part character, remove other time part characters that represent smaller time parts.

    e.g. if ``M`` (month) is given, remove characters representing day, hour, minute
    and second, but not month or year.
    """
    pivot = _get_known_time_part(time_part_character)
    return [
        character
        for character in time_part_characters
        if get_time_part(character).value <= pivot.value
    ]


def get_time_part_aliases(time_part_character: str) -> Tuple[str, ...]:
    """All characters that render the same time part as ``time_part_character``."""
    return _ALIASES_BY_TIME_PART[_get_known_time_part(time_part_character)]


def remove_time_part_aliases_from_format(
    time_part_aliases: Iterable[str], date_format: str, escape_aware: bool = False
) -> str:
    """
    Remove every occurrence of the given characters from a format.

    By default this is a plain textual removal, so escaped occurrences go too.
    With ``escape_aware`` set, characters directly preceded by a backslash are kept.
    """
    aliases = "".join(time_part_aliases)
    if not aliases:
        return date_format
    pattern = "[%s]" % re.escape(aliases)
    if escape_aware:
        pattern = r"(?<!\\)" + pattern
    return re.sub(pattern, "", date_format)


def remove_time_part_character_from_format(
    time_part_character: str, date_format: str, escape_aware: bool = False
) -> str:
    """Remove a time part character and its aliases from a format."""
    return remove_time_part_aliases_from_format(
        get_time_part_aliases(time_part_character), date_format, escape_aware
    )


def trim_format(date_format: str, delimiters: str) -> str:
    """
    Trim delimiters left dangling at the ends of a format, then whitespace.

    Avoids a format of ``d/M/Y`` leaving ``d//`` behind once month and year
    are consolidated. Runs of delimiters are removed in one go, but whitespace
    is only trimmed afterwards, so ``j. `` keeps its period.
    """
    return date_format.strip(delimiters).strip()


def _get_known_time_part(character: str) -> TimePart:
    time_part = get_time_part(character)
    if time_part is None:
        raise ValueError("Unknown time part character: %r" % character)
    return time_part
