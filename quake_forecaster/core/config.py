"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from datetime import date

from quake_forecaster.core.params import DEFAULT_MIN_DATE, ValidationError, ValidationResult


# USGS real-time summary feed, CSV format
DEFAULT_FEED_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_month.csv"
)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_path: Local CSV feed file (takes precedence over feed_url)
        feed_url: Remote CSV feed URL
        feed_encoding: Text encoding of the feed
        min_date: Earliest accepted query start date
        default_radius_km: Radius used when a lookup omits one
        hotspot_radius_km: Neighborhood radius for hotspot search
        top_limit: Number of events in a top earthquakes listing
        request_timeout: HTTP timeout in seconds
    """
    feed_path: str | None = None
    feed_url: str | None = DEFAULT_FEED_URL
    feed_encoding: str = "utf-8"
    min_date: date = field(default=DEFAULT_MIN_DATE)
    default_radius_km: float = 100.0
    hotspot_radius_km: float = 100.0
    top_limit: int = 10
    request_timeout: int = 30


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if not config.feed_path and not config.feed_url:
        errors.append(ValidationError(
            field="feed_path",
            message="No feed configured (set feed_path or feed_url)",
        ))

    for name in ("default_radius_km", "hotspot_radius_km"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"Radius must be positive, got {value}",
            ))

    if config.top_limit <= 0:
        errors.append(ValidationError(
            field="top_limit",
            message=f"Limit must be positive, got {config.top_limit}",
        ))

    if config.request_timeout <= 0:
        errors.append(ValidationError(
            field="request_timeout",
            message=f"Timeout should be positive, got {config.request_timeout}",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
