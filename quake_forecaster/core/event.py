"""Seismic event model - Pure data structure."""

from dataclasses import dataclass

from quake_forecaster.core.event_time import EventTime
from quake_forecaster.core.geo import GeoPoint
from quake_forecaster.core.magnitude import Magnitude


EARTHQUAKE_EVENT_TYPE = "earthquake"


@dataclass(frozen=True)
class SeismicEvent:
    """Immutable seismic event from the USGS feed.

    Attributes:
        id: Unique USGS event ID
        time: Event time (UTC)
        location: Epicenter and place description
        magnitude: Magnitude, magnitude type and depth
        event_type: USGS event type tag ('earthquake', 'quarry blast', ...)
    """
    id: str
    time: EventTime
    location: GeoPoint
    magnitude: Magnitude
    event_type: str

    @property
    def is_earthquake(self) -> bool:
        """True if the USGS event type is 'earthquake'."""
        return self.event_type == EARTHQUAKE_EVENT_TYPE

    def __str__(self) -> str:
        return f"{self.id} {self.time} M{self.magnitude} @ {self.location}"
