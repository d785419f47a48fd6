"""Earthquake queries - Pure functions.

Filtering, sorting and hotspot search over parsed seismic events.
Results are always lists of the original SeismicEvent objects, never copies.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Iterable

from quake_forecaster.core.errors import ParseError, QueryError
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.event_time import EventTime
from quake_forecaster.core.geo import GeoPoint, is_within_radius


# Rank of the neighborhood returned by find_hotspot, after sorting by
# neighborhood size (largest first). Index 1 is the second-ranked entry.
HOTSPOT_RANK = 1


@dataclass(frozen=True)
class Hotspot:
    """Center of earthquake activity and its surrounding events.

    Attributes:
        center: Event whose neighborhood was selected
        neighborhood: Events within the radius of center, center included
    """
    center: SeismicEvent
    neighborhood: list[SeismicEvent]

    @property
    def count(self) -> int:
        """Number of events in the neighborhood."""
        return len(self.neighborhood)


def filter_earthquakes(
    results: Iterable[SeismicEvent | ParseError],
) -> list[SeismicEvent]:
    """Keep successfully parsed events whose type is 'earthquake'.

    Pure function. Parse failures are dropped, not escalated.

    Args:
        results: Per-record parse outcomes

    Returns:
        Earthquakes in input order (possibly empty)
    """
    return [
        r for r in results
        if isinstance(r, SeismicEvent) and r.is_earthquake
    ]


def filter_date_range(
    events: list[SeismicEvent],
    start: EventTime,
    end: EventTime,
) -> list[SeismicEvent]:
    """Filter events to start <= time <= end (both inclusive).

    Pure function.
    """
    return [e for e in events if start <= e.time <= end]


def filter_radius(
    events: list[SeismicEvent],
    center: GeoPoint,
    radius_km: float,
) -> list[SeismicEvent]:
    """Filter events to those within radius_km of center (inclusive).

    Pure function.
    """
    return [e for e in events if is_within_radius(e.location, center, radius_km)]


def sort_by_magnitude(events: list[SeismicEvent]) -> list[SeismicEvent]:
    """Sort events by magnitude value, largest first.

    Pure function. Events of equal magnitude keep their input order.
    """
    return sorted(events, key=lambda e: e.magnitude.value, reverse=True)


def find_hotspot(events: list[SeismicEvent], radius_km: float) -> Hotspot:
    """Find the center of earthquake activity.

    Pure function. Every event is paired with its neighborhood (events
    within radius_km of it, itself included). Pairs are ranked by
    neighborhood size, largest first; equal sizes keep input order. The
    pair at HOTSPOT_RANK is returned.

    Args:
        events: Events to search
        radius_km: Neighborhood radius in kilometers

    Returns:
        Hotspot with the selected center and its neighborhood

    Raises:
        QueryError: If fewer than two events are given
    """
    if len(events) <= HOTSPOT_RANK:
        raise QueryError(
            f"Hotspot search needs at least {HOTSPOT_RANK + 1} events, "
            f"got {len(events)}"
        )

    candidates = [
        Hotspot(center=e, neighborhood=filter_radius(events, e.location, radius_km))
        for e in events
    ]
    ranked = sorted(candidates, key=lambda h: h.count, reverse=True)

    return ranked[HOTSPOT_RANK]


def top_earthquakes(
    events: list[SeismicEvent],
    start: EventTime,
    end: EventTime,
    limit: int = 10,
) -> list[SeismicEvent]:
    """Largest earthquakes in a date range.

    Pure function.
    """
    return sort_by_magnitude(filter_date_range(events, start, end))[:limit]


def _unwrap(events: list[SeismicEvent] | QueryError) -> list[SeismicEvent]:
    """Forward an upstream failure unchanged."""
    if isinstance(events, QueryError):
        raise events
    return events


def query(
    events: list[SeismicEvent] | QueryError,
    date_range: tuple[EventTime, EventTime] | None = None,
    radius: tuple[GeoPoint, float] | None = None,
    sort: bool = False,
) -> list[SeismicEvent]:
    """Apply optional date and radius filters, then optionally sort.

    Pure function.

    Args:
        events: Earthquakes, or the failure of an upstream stage
        date_range: (start, end) times, both inclusive
        radius: (center, radius_km)
        sort: Sort the result by magnitude, largest first

    Returns:
        Matching events

    Raises:
        QueryError: If events is an upstream failure
    """
    result = list(_unwrap(events))

    if date_range is not None:
        start, end = date_range
        result = filter_date_range(result, start, end)

    if radius is not None:
        center, radius_km = radius
        result = filter_radius(result, center, radius_km)

    if sort:
        result = sort_by_magnitude(result)

    return result


def hotspot(events: list[SeismicEvent] | QueryError, radius_km: float) -> Hotspot:
    """Find the hotspot, forwarding an upstream failure unchanged.

    Raises:
        QueryError: If events is an upstream failure or has fewer than two events
    """
    return find_hotspot(_unwrap(events), radius_km)
