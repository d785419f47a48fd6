"""Event timestamps - Pure functions.

USGS feed times are always UTC (Zulu) and arrive in one fixed layout,
e.g. ``2017-11-25T18:46:41.320Z``. Validation is syntactic only: the digit
pattern is checked, calendar correctness is not (month 19 parses).
"""

import re
from dataclasses import dataclass
from datetime import date

from quake_forecaster.core.errors import ParseError


EVENT_TIME_PATTERN = re.compile(
    r"^([1-2]\d{3})-([0-1]\d)-([0-3]\d)T([0-2]\d):([0-5]\d):([0-5]\d)\.\d{3}Z$",
    re.ASCII,
)

# Same layout with any digits, used to name the group that broke the pattern
_LAYOUT_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.\d{3}Z$",
    re.ASCII,
)

_FIELD_GROUPS = (
    ("year", "12"),
    ("month", "01"),
    ("day", "0123"),
    ("hour", "012"),
    ("minute", "012345"),
    ("second", "012345"),
)


@dataclass(frozen=True, order=True)
class EventTime:
    """Immutable UTC timestamp with second resolution.

    Ordering compares year, month, day, hour, minute, second in that order.

    Attributes:
        year: Four digit year
        month: Month field as written in the feed
        day: Day field as written in the feed
        hour: Hour (UTC)
        minute: Minute
        second: Whole seconds (fraction dropped)
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    @classmethod
    def from_date(cls, value: date) -> "EventTime":
        """Midnight (UTC) at the start of a calendar date."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def end_of_day(cls, value: date) -> "EventTime":
        """Last whole second (UTC) of a calendar date."""
        return cls(value.year, value.month, value.day, 23, 59, 59)


def _offending_group(raw: str) -> str:
    """Name the first field group that does not fit the accepted pattern."""
    layout = _LAYOUT_PATTERN.fullmatch(raw)
    if layout is None:
        return "layout"

    for (name, leading_digits), group in zip(_FIELD_GROUPS, layout.groups()):
        if group[0] not in leading_digits:
            return name

    return "layout"


def parse_event_time(raw: str) -> EventTime:
    """Parse a feed timestamp into an EventTime.

    Pure function.

    Args:
        raw: Timestamp text in ``YYYY-MM-DDThh:mm:ss.sssZ`` layout

    Returns:
        Parsed EventTime

    Raises:
        ParseError: If the text does not match the accepted pattern
    """
    match = EVENT_TIME_PATTERN.fullmatch(raw)
    if match is None:
        group = _offending_group(raw)
        raise ParseError(f"Parse error in UTC date time ({group}): {raw!r}", raw)

    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    return EventTime(year, month, day, hour, minute, second)


def compare_event_times(a: EventTime, b: EventTime) -> int:
    """Compare two times field by field.

    Returns:
        -1 if a is earlier, 0 if every field is equal, 1 if a is later
    """
    if a == b:
        return 0
    return -1 if a < b else 1
