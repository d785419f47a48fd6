"""Query parameter validation - Pure functions.

Callers validate user-supplied query parameters with these rules before
calling the query functions, which assume well-formed arguments.
"""

from dataclasses import dataclass, field
from datetime import date


# Earliest query start date accepted by default
DEFAULT_MIN_DATE = date(2010, 1, 1)


@dataclass
class ValidationError:
    """A query parameter validation error.

    Attributes:
        field: The parameter that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating query parameters.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        """Error messages prefixed with their field names."""
        return [f"{e.field}: {e.message}" for e in self.errors]


def _result(errors: list[ValidationError]) -> ValidationResult:
    has_critical = any(e.severity == "error" for e in errors)
    return ValidationResult(valid=not has_critical, errors=errors)


def check_date_range(
    start: date,
    end: date,
    min_date: date = DEFAULT_MIN_DATE,
) -> list[ValidationError]:
    """Check a calendar date range.

    Pure function.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if start > end:
        errors.append(ValidationError(
            field="start_date",
            message="start/end date error",
        ))
    elif start < min_date:
        errors.append(ValidationError(
            field="start_date",
            message=f"start date must be on or after {min_date.isoformat()}",
        ))

    return errors


def check_location(
    latitude: float,
    longitude: float,
    radius_km: float,
) -> list[ValidationError]:
    """Check a search center and radius.

    Pure function.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= latitude <= 90:
        errors.append(ValidationError(
            field="latitude",
            message=f"Latitude {latitude} out of range [-90, 90]",
        ))

    if not -180 <= longitude <= 180:
        errors.append(ValidationError(
            field="longitude",
            message=f"Longitude {longitude} out of range [-180, 180]",
        ))

    if not radius_km > 0:
        errors.append(ValidationError(
            field="radius",
            message=f"Radius must be positive, got {radius_km}",
        ))

    return errors


def validate_date_range(
    start: date,
    end: date,
    min_date: date = DEFAULT_MIN_DATE,
) -> ValidationResult:
    """Validate a date range for a top earthquakes query."""
    return _result(check_date_range(start, end, min_date))


def validate_lookup(
    latitude: float,
    longitude: float,
    radius_km: float,
    start: date,
    end: date,
    min_date: date = DEFAULT_MIN_DATE,
) -> ValidationResult:
    """Validate all parameters of a location lookup query."""
    errors = check_location(latitude, longitude, radius_km)
    errors.extend(check_date_range(start, end, min_date))
    return _result(errors)
