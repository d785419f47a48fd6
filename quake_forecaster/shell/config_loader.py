"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in quake_forecaster/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from quake_forecaster.core.config import Config, DEFAULT_FEED_URL
from quake_forecaster.core.params import DEFAULT_MIN_DATE


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_date(value: Any) -> date:
    """Parse a date from YAML (already a date) or ISO text."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object

    Raises:
        ValueError: If a numeric or date value cannot be converted
    """
    data = {key: _resolve_value(value) for key, value in data.items()}

    return Config(
        feed_path=data.get("feed_path"),
        feed_url=data.get("feed_url", DEFAULT_FEED_URL),
        feed_encoding=data.get("feed_encoding", "utf-8"),
        min_date=_parse_date(data.get("min_date", DEFAULT_MIN_DATE)),
        default_radius_km=float(data.get("default_radius_km", 100.0)),
        hotspot_radius_km=float(data.get("hotspot_radius_km", 100.0)),
        top_limit=int(data.get("top_limit", 10)),
        request_timeout=int(data.get("request_timeout", 30)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: feed=%s, hotspot radius %.1f km",
        config.feed_path or config.feed_url,
        config.hotspot_radius_km,
    )

    return config
