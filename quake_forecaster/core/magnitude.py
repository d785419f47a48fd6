"""Event magnitude - Pure functions."""

import math
from dataclasses import dataclass

from quake_forecaster.core.errors import ParseError


@dataclass(frozen=True)
class Magnitude:
    """Immutable magnitude reading.

    Attributes:
        value: Magnitude value
        units: Magnitude type label (e.g., 'ml', 'mb', 'mww')
        depth: Hypocenter depth in kilometers (not validated; may be negative)
    """
    value: float
    units: str
    depth: float

    def __str__(self) -> str:
        return f"{self.value}[{self.units}],{self.depth}[km]"


def parse_magnitude(fields: list[str]) -> Magnitude:
    """Parse [value, units, depth] fields into a Magnitude.

    Pure function.

    Raises:
        ParseError: If the field count is not three or value/depth are not finite numbers
    """
    if len(fields) != 3:
        raise ParseError(f"Parse error in magnitude: {fields}", fields)

    value, units, depth = fields

    try:
        magnitude = Magnitude(value=float(value), units=units, depth=float(depth))
    except (TypeError, ValueError):
        raise ParseError(f"Parse error in magnitude: {fields}", fields) from None

    if not (math.isfinite(magnitude.value) and math.isfinite(magnitude.depth)):
        raise ParseError(f"Parse error in magnitude: {fields}", fields)

    return magnitude
