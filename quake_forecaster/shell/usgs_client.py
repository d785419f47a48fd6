"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS earthquake feeds.
All I/O is contained here; parsing and queries are in the core module.
"""

import logging

import requests

from quake_forecaster.core.config import DEFAULT_FEED_URL


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


class USGSClient:
    """Client for fetching CSV earthquake feeds from USGS.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            feed_url: Default summary feed URL
            timeout: Request timeout in seconds
        """
        self.feed_url = feed_url
        self.timeout = timeout

    def fetch_feed(self, url: str | None = None) -> list[str]:
        """Fetch a USGS CSV summary feed.

        This method performs HTTP I/O.

        Args:
            url: Feed URL, defaults to the client's feed_url

        Returns:
            Decoded feed lines, header included

        Raises:
            requests.RequestException: If the request fails
        """
        feed_url = url or self.feed_url

        logger.info("Fetching USGS feed", extra={"url": feed_url})

        response = requests.get(feed_url, timeout=self.timeout)
        response.raise_for_status()

        lines = response.text.splitlines()

        logger.info("Fetched %d feed lines from %s", len(lines), feed_url)

        return lines
