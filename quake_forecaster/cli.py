"""Command line entry point.

Runs location lookups, top earthquake listings and hotspot searches
against the configured USGS feed.

Usage:
    # Earthquakes within 50 km of a point during January 2020
    quake-forecaster lookup --lat 37.77 --lon -122.42 --radius 50 \
        --start 2020-01-01 --end 2020-01-31

    # Ten largest earthquakes in a date range
    quake-forecaster top --start 2020-01-01 --end 2020-12-31

    # Hotspot with a 100 km neighborhood, from a local file
    quake-forecaster hotspot --radius 100 --feed data/all_month.csv

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import sys
from datetime import date

import requests

from quake_forecaster.core.config import Config, validate_config
from quake_forecaster.core.errors import QueryError
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.event_time import EventTime
from quake_forecaster.core.geo import GeoPoint
from quake_forecaster.core.params import validate_date_range, validate_lookup
from quake_forecaster.core.query import hotspot, query, top_earthquakes
from quake_forecaster.shell.config_loader import load_config
from quake_forecaster.shell.feed_loader import load_earthquakes


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _print_events(events: list[SeismicEvent]) -> None:
    if not events:
        print("No earthquakes found.")
        return

    for i, event in enumerate(events, 1):
        print(
            f"{i:3d}. M{event.magnitude.value:.1f} {event.magnitude.units:<4} "
            f"{event.time}  {event.location.label}  "
            f"({event.location.latitude:.3f}, {event.location.longitude:.3f}) "
            f"[{event.id}]"
        )


def _report_invalid(messages: list[str]) -> int:
    for message in messages:
        logger.error("Invalid parameter - %s", message)
    return 2


def run_lookup(args: argparse.Namespace, config: Config, events: list[SeismicEvent]) -> int:
    radius_km = args.radius if args.radius is not None else config.default_radius_km

    validation = validate_lookup(
        args.lat, args.lon, radius_km, args.start, args.end, config.min_date,
    )
    if not validation.valid:
        return _report_invalid(validation.messages)

    result = query(
        events,
        date_range=(EventTime.from_date(args.start), EventTime.end_of_day(args.end)),
        radius=(GeoPoint(args.lat, args.lon), radius_km),
        sort=True,
    )

    print(f"{len(result)} earthquakes within {radius_km:g} km of ({args.lat}, {args.lon})")
    _print_events(result)
    return 0


def run_top(args: argparse.Namespace, config: Config, events: list[SeismicEvent]) -> int:
    validation = validate_date_range(args.start, args.end, config.min_date)
    if not validation.valid:
        return _report_invalid(validation.messages)

    limit = args.limit if args.limit is not None else config.top_limit
    result = top_earthquakes(
        events,
        EventTime.from_date(args.start),
        EventTime.end_of_day(args.end),
        limit=limit,
    )

    print(f"Top {limit} earthquakes, {args.start} to {args.end}")
    _print_events(result)
    return 0


def run_hotspot(args: argparse.Namespace, config: Config, events: list[SeismicEvent]) -> int:
    radius_km = args.radius if args.radius is not None else config.hotspot_radius_km

    try:
        spot = hotspot(events, radius_km)
    except QueryError as e:
        logger.error("Hotspot search failed: %s", e.message)
        return 1

    print(f"Hotspot: {spot.center}")
    print(f"{spot.count} earthquakes within {radius_km:g} km")
    _print_events(spot.neighborhood)
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quake-forecaster",
        description="Query earthquake activity from the USGS feed",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--feed", help="Local CSV feed file (overrides config)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="Earthquakes near a location")
    lookup.add_argument("--lat", type=float, required=True)
    lookup.add_argument("--lon", type=float, required=True)
    lookup.add_argument("--radius", type=float, help="Radius in km")
    lookup.add_argument("--start", type=date.fromisoformat, required=True)
    lookup.add_argument("--end", type=date.fromisoformat, required=True)
    lookup.set_defaults(handler=run_lookup)

    top = subparsers.add_parser("top", help="Largest earthquakes in a date range")
    top.add_argument("--start", type=date.fromisoformat, required=True)
    top.add_argument("--end", type=date.fromisoformat, required=True)
    top.add_argument("--limit", type=_positive_int, help="Number of earthquakes to list")
    top.set_defaults(handler=run_top)

    spot = subparsers.add_parser("hotspot", help="Center of earthquake activity")
    spot.add_argument("--radius", type=float, help="Neighborhood radius in km")
    spot.set_defaults(handler=run_hotspot)

    return parser


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.feed:
        config.feed_path = args.feed

    validation = validate_config(config)
    for error in validation.errors:
        log = logger.error if error.severity == "error" else logger.warning
        log("Config %s: %s", error.field, error.message)
    if not validation.valid:
        return 2

    try:
        events = load_earthquakes(config)
    except (requests.RequestException, OSError, ValueError) as e:
        logger.error("Failed to load earthquake feed: %s", e)
        return 1

    return args.handler(args, config, events)


if __name__ == "__main__":
    sys.exit(main())
