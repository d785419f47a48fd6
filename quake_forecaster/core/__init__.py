"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Seismic event models and CSV record parsing
- Geo/distance calculations
- Date range, radius and magnitude queries
- Hotspot search
- Query parameter validation

All functions here are deterministic and have no I/O.
"""

from quake_forecaster.core.errors import ParseError, QueryError
from quake_forecaster.core.geo import GeoPoint, calculate_distance
from quake_forecaster.core.event_time import EventTime, compare_event_times, parse_event_time
from quake_forecaster.core.magnitude import Magnitude, parse_magnitude
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.parser import parse_feed, parse_record, partition_results
from quake_forecaster.core.query import (
    Hotspot,
    filter_date_range,
    filter_earthquakes,
    filter_radius,
    find_hotspot,
    hotspot,
    query,
    sort_by_magnitude,
    top_earthquakes,
)

__all__ = [
    # Errors
    "ParseError",
    "QueryError",
    # Value types
    "GeoPoint",
    "calculate_distance",
    "EventTime",
    "compare_event_times",
    "parse_event_time",
    "Magnitude",
    "parse_magnitude",
    "SeismicEvent",
    # Parsing
    "parse_feed",
    "parse_record",
    "partition_results",
    # Queries
    "Hotspot",
    "filter_date_range",
    "filter_earthquakes",
    "filter_radius",
    "find_hotspot",
    "hotspot",
    "query",
    "sort_by_magnitude",
    "top_earthquakes",
]
