"""
Geographic coordinate value object.

Latitude and longitude are WGS84 decimal degrees. Range validation
happens at construction so the converters can assume valid input.
"""

from dataclasses import dataclass
from typing import Any, Sequence
import math

from ..errors import OutOfRangeError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate ranges."""
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise OutOfRangeError(
                f"Coordinate must be finite, got ({self.latitude}, {self.longitude})"
            )

        if not -90.0 <= self.latitude <= 90.0:
            raise OutOfRangeError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )

        if not -180.0 <= self.longitude <= 180.0:
            raise OutOfRangeError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    @staticmethod
    def from_pair(pair: Sequence[float]) -> 'Coordinate':
        """Create a coordinate from a (latitude, longitude) sequence."""
        if len(pair) != 2:
            raise ValueError(
                f"Expected (latitude, longitude) pair, got {len(pair)} values"
            )
        return Coordinate(float(pair[0]), float(pair[1]))


def as_coordinate(value: Any) -> Coordinate:
    """
    Normalize converter input to a Coordinate.

    Accepts a Coordinate, any object exposing ``latitude`` and
    ``longitude`` attributes, or a (latitude, longitude) pair.

    Raises:
        OutOfRangeError: If the values are outside geographic range
        TypeError: If the value has no recognizable shape
    """
    if isinstance(value, Coordinate):
        return value

    if hasattr(value, 'latitude') and hasattr(value, 'longitude'):
        return Coordinate(float(value.latitude), float(value.longitude))

    if isinstance(value, (tuple, list)):
        return Coordinate.from_pair(value)

    raise TypeError(
        f"Cannot interpret {type(value).__name__} as a coordinate"
    )
