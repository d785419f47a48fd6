"""USGS CSV record parsing - Pure functions.

Records are split on literal commas; the feed's quoting is not honoured.
Field positions (0-indexed):

    0   time
    1   latitude
    2   longitude
    3   depth
    4   magnitude
    5   magnitude type
    11  event id
    13  place
    15  event type
"""

from typing import Iterable

from quake_forecaster.core.errors import ParseError
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.event_time import parse_event_time
from quake_forecaster.core.geo import parse_location
from quake_forecaster.core.magnitude import parse_magnitude


TIME_FIELD = 0
LOCATION_FIELDS = (1, 2, 13)
MAGNITUDE_FIELDS = (4, 5, 3)
ID_FIELD = 11
EVENT_TYPE_FIELD = 15

MIN_FIELD_COUNT = EVENT_TYPE_FIELD + 1

# First column of the header line in USGS CSV downloads
HEADER_PREFIX = "time,"

ParseResult = SeismicEvent | ParseError


def _elements(fields: list[str], indices: tuple[int, ...]) -> list[str]:
    return [fields[i] for i in indices]


def parse_record(record: str) -> SeismicEvent:
    """Parse one raw CSV record into a SeismicEvent.

    Pure function. Sub-parses run in the order time, location, magnitude;
    the first failure is raised.

    Args:
        record: One line of the feed

    Returns:
        SeismicEvent for the record

    Raises:
        ParseError: If the record is short or any field has the wrong shape
    """
    fields = record.split(",")

    if len(fields) < MIN_FIELD_COUNT:
        raise ParseError(
            f"Expected at least {MIN_FIELD_COUNT} fields, got {len(fields)}",
            record,
        )

    return SeismicEvent(
        id=fields[ID_FIELD],
        time=parse_event_time(fields[TIME_FIELD]),
        location=parse_location(_elements(fields, LOCATION_FIELDS)),
        magnitude=parse_magnitude(_elements(fields, MAGNITUDE_FIELDS)),
        event_type=fields[EVENT_TYPE_FIELD],
    )


def parse_feed(lines: Iterable[str], skip_header: bool = True) -> list[ParseResult]:
    """Parse feed lines into per-record outcomes.

    Pure function: a malformed record becomes a ParseError value in the
    result, it is never raised.

    Args:
        lines: Decoded feed lines
        skip_header: Drop a leading USGS header line if present

    Returns:
        One SeismicEvent or ParseError per non-blank record, in input order
    """
    results: list[ParseResult] = []

    for index, line in enumerate(lines):
        record = line.rstrip("\r\n")
        if not record.strip():
            continue
        if skip_header and index == 0 and record.startswith(HEADER_PREFIX):
            continue

        try:
            results.append(parse_record(record))
        except ParseError as e:
            results.append(e)

    return results


def partition_results(
    results: Iterable[ParseResult],
) -> tuple[list[SeismicEvent], list[ParseError]]:
    """Split parse outcomes into (events, errors), keeping order."""
    events: list[SeismicEvent] = []
    errors: list[ParseError] = []

    for result in results:
        if isinstance(result, ParseError):
            errors.append(result)
        else:
            events.append(result)

    return events, errors
