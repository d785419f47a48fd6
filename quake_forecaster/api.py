"""Earthquake Forecaster API - FastAPI service.

Thin HTTP layer over the query functions in quake_forecaster.core.
Part of the imperative shell - handles HTTP I/O and parameter validation.
"""

import logging
import time
from datetime import date, datetime, timezone
from typing import Any

import requests
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from quake_forecaster.core.config import Config
from quake_forecaster.core.errors import QueryError
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.event_time import EventTime
from quake_forecaster.core.geo import GeoPoint
from quake_forecaster.core.params import ValidationResult, validate_date_range, validate_lookup
from quake_forecaster.core.query import Hotspot, hotspot, query, top_earthquakes
from quake_forecaster.shell.config_loader import load_config
from quake_forecaster.shell.feed_loader import load_earthquakes


logger = logging.getLogger(__name__)

app = FastAPI(
    title="Earthquake Forecaster API",
    description="Date range, location and hotspot queries over the USGS earthquake feed",
    version="1.0.0",
)

CACHE_TTL_SECONDS = 300  # 5 minutes


# ===== Response Models =====

class EventOut(BaseModel):
    id: str
    time: str
    latitude: float
    longitude: float
    place: str
    magnitude: float
    magnitude_units: str
    depth_km: float
    event_type: str


class EventListOut(BaseModel):
    earthquakes: list[EventOut]
    count: int
    fetched_at: str


class HotspotOut(BaseModel):
    radius_km: float
    center: EventOut
    neighborhood: list[EventOut]
    count: int
    fetched_at: str


# ===== Dependencies =====

_config: Config | None = None
_earthquake_cache: list[SeismicEvent] = []
_cache_timestamp: float = 0

# radius_km -> (earthquake list the hotspot was computed from, hotspot)
_hotspot_cache: dict[float, tuple[list[SeismicEvent], Hotspot]] = {}


def get_config() -> Config:
    """Get the process configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _is_cache_valid() -> bool:
    """Check if the earthquake cache is still valid."""
    if not _earthquake_cache:
        return False
    return time.time() - _cache_timestamp < CACHE_TTL_SECONDS


def get_earthquakes(config: Config = Depends(get_config)) -> list[SeismicEvent]:
    """Get earthquakes from cache or the configured feed."""
    global _earthquake_cache, _cache_timestamp

    if _is_cache_valid():
        return _earthquake_cache

    try:
        earthquakes = load_earthquakes(config)
    except (requests.RequestException, OSError, ValueError):
        logger.exception("Failed to load earthquake feed")
        raise HTTPException(status_code=502, detail="Failed to load earthquake data")

    _earthquake_cache = earthquakes
    _cache_timestamp = time.time()
    _hotspot_cache.clear()

    return earthquakes


# ===== Helper Functions =====

def _event_to_dict(event: SeismicEvent) -> dict[str, Any]:
    """Convert SeismicEvent to API response format."""
    return {
        "id": event.id,
        "time": str(event.time),
        "latitude": event.location.latitude,
        "longitude": event.location.longitude,
        "place": event.location.label,
        "magnitude": event.magnitude.value,
        "magnitude_units": event.magnitude.units,
        "depth_km": event.magnitude.depth,
        "event_type": event.event_type,
    }


def _event_list(events: list[SeismicEvent]) -> dict[str, Any]:
    return {
        "earthquakes": [_event_to_dict(e) for e in events],
        "count": len(events),
        "fetched_at": datetime.now(timezone.utc).isoformat(),
    }


def _cached_hotspot(earthquakes: list[SeismicEvent], radius_km: float) -> Hotspot:
    """Hotspot for the current earthquake list, computed once per radius."""
    cached = _hotspot_cache.get(radius_km)
    if cached is not None and cached[0] is earthquakes:
        return cached[1]

    spot = hotspot(earthquakes, radius_km)
    _hotspot_cache[radius_km] = (earthquakes, spot)

    return spot


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.valid:
        raise HTTPException(status_code=400, detail={"errors": result.messages})


# ===== Endpoints =====

@app.get("/lookup", response_model=EventListOut)
def lookup_earthquakes(
    latitude: float = Query(...),
    longitude: float = Query(...),
    start_date: date = Query(...),
    end_date: date = Query(...),
    radius: float | None = Query(default=None),
    config: Config = Depends(get_config),
    earthquakes: list[SeismicEvent] = Depends(get_earthquakes),
):
    """Earthquakes within a radius and date range, largest first."""
    radius_km = radius if radius is not None else config.default_radius_km

    _raise_if_invalid(validate_lookup(
        latitude, longitude, radius_km, start_date, end_date, config.min_date,
    ))

    result = query(
        earthquakes,
        date_range=(EventTime.from_date(start_date), EventTime.end_of_day(end_date)),
        radius=(GeoPoint(latitude, longitude), radius_km),
        sort=True,
    )

    return _event_list(result)


@app.get("/top-ten", response_model=EventListOut)
def get_top_earthquakes(
    start_date: date = Query(...),
    end_date: date = Query(...),
    config: Config = Depends(get_config),
    earthquakes: list[SeismicEvent] = Depends(get_earthquakes),
):
    """Largest earthquakes in a date range."""
    _raise_if_invalid(validate_date_range(start_date, end_date, config.min_date))

    result = top_earthquakes(
        earthquakes,
        EventTime.from_date(start_date),
        EventTime.end_of_day(end_date),
        limit=config.top_limit,
    )

    return _event_list(result)


@app.get("/hotspot", response_model=HotspotOut)
def get_hotspot(
    radius: float | None = Query(default=None, gt=0),
    config: Config = Depends(get_config),
    earthquakes: list[SeismicEvent] = Depends(get_earthquakes),
):
    """Center of earthquake activity and its neighborhood."""
    radius_km = radius if radius is not None else config.hotspot_radius_km

    try:
        spot = _cached_hotspot(earthquakes, radius_km)
    except QueryError as e:
        raise HTTPException(status_code=422, detail=e.message)

    return {
        "radius_km": radius_km,
        "center": _event_to_dict(spot.center),
        "neighborhood": [_event_to_dict(e) for e in spot.neighborhood],
        "count": spot.count,
        "fetched_at": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
