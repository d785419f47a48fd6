"""Feed Loader - Imperative Shell.

Acquires raw feed text from a local file or from USGS and hands decoded
lines to the core parser. Files are opened and closed here; the core only
ever sees lines.
"""

import logging
from pathlib import Path

from quake_forecaster.core.config import Config
from quake_forecaster.core.event import SeismicEvent
from quake_forecaster.core.parser import parse_feed, partition_results
from quake_forecaster.core.query import filter_earthquakes
from quake_forecaster.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


def read_feed_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a CSV feed file into lines.

    This function performs file I/O.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    path = Path(path)

    logger.info("Reading feed from %s", path)

    with open(path, "r", encoding=encoding) as f:
        return f.read().splitlines()


def load_feed_lines(config: Config, client: USGSClient | None = None) -> list[str]:
    """Load feed lines from the configured source.

    A local feed_path takes precedence over feed_url.

    Raises:
        ValueError: If no feed source is configured
        OSError: If the local file cannot be read
        requests.RequestException: If the remote feed cannot be fetched
    """
    if config.feed_path:
        return read_feed_lines(config.feed_path, config.feed_encoding)

    if config.feed_url:
        client = client or USGSClient(timeout=config.request_timeout)
        return client.fetch_feed(config.feed_url)

    raise ValueError("No feed configured (set feed_path or feed_url)")


def load_earthquakes(config: Config, client: USGSClient | None = None) -> list[SeismicEvent]:
    """Load, parse and filter the configured feed down to earthquakes.

    Malformed records are logged and dropped.
    """
    results = parse_feed(load_feed_lines(config, client))
    events, errors = partition_results(results)

    for error in errors:
        logger.debug("Skipping malformed record: %s", error.message)

    earthquakes = filter_earthquakes(results)

    logger.info(
        "Parsed %d events (%d earthquakes), %d malformed records skipped",
        len(events),
        len(earthquakes),
        len(errors),
    )

    return earthquakes

