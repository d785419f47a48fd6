"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP)
- Feed file reading
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from quake_forecaster.shell.usgs_client import USGSClient
from quake_forecaster.shell.feed_loader import load_earthquakes, load_feed_lines, read_feed_lines
from quake_forecaster.shell.config_loader import load_config, Config

__all__ = [
    "USGSClient",
    "load_earthquakes",
    "load_feed_lines",
    "read_feed_lines",
    "load_config",
    "Config",
]
