"""
Coordinate conversion facade.

Wraps a coordinate and renders it as Degrees-Minutes-Seconds,
Decimal-Minutes or UTM, using the templates and grid settings of a
ConverterConfig.
"""

from typing import Any, Optional

from ..config import ConverterConfig, DEFAULT_CONFIG
from ..models.angle import DecomposedAngle
from ..models.coordinate import Coordinate, as_coordinate
from ..models.utm import UTMResult
from ..projection import create_projector
from .decomposer import decompose
from .renderer import DM_PLACEHOLDERS, DMS_PLACEHOLDERS, render


class Converter:
    """
    Converts one coordinate to DMS, DM and UTM representations.

    Attributes:
        coordinate: The coordinate to convert
        config: Templates, rounding and projection parameters
    """

    def __init__(self, coordinate: Any, config: ConverterConfig = DEFAULT_CONFIG):
        """
        Args:
            coordinate: Coordinate, object with latitude/longitude, or pair
            config: Converter configuration
        """
        self.coordinate: Coordinate = as_coordinate(coordinate)
        self.config = config

    def _decompose(self, value: float) -> DecomposedAngle:
        return decompose(
            value,
            self.config.decimal_minutes_precision,
            self.config.decimal_minutes_rounding,
        )

    def to_degrees_minutes_seconds(self, template: Optional[str] = None) -> str:
        """
        Format as degrees, minutes and seconds.

        Args:
            template: Format string (default: config.dms_format)

        Returns:
            Formatted string, e.g. "40°26′46″N, 79°56′56″W"
        """
        if template is None:
            template = self.config.dms_format

        return render(
            template,
            self._decompose(self.coordinate.latitude),
            self._decompose(self.coordinate.longitude),
            DMS_PLACEHOLDERS,
        )

    def to_dms(self, template: Optional[str] = None) -> str:
        """Alias of to_degrees_minutes_seconds."""
        return self.to_degrees_minutes_seconds(template)

    def to_decimal_minutes(self, template: Optional[str] = None) -> str:
        """
        Format as degrees and decimal minutes.

        Args:
            template: Format string (default: config.dm_format)

        Returns:
            Formatted string, e.g. "40 26.7717N, -79 56.93172W"
        """
        if template is None:
            template = self.config.dm_format

        return render(
            template,
            self._decompose(self.coordinate.latitude),
            self._decompose(self.coordinate.longitude),
            DM_PLACEHOLDERS,
        )

    def to_dm(self, template: Optional[str] = None) -> str:
        """Alias of to_decimal_minutes."""
        return self.to_decimal_minutes(template)

    def utm(self) -> UTMResult:
        """Project onto the UTM grid and return the structured result."""
        return create_projector(self.config).project(self.coordinate)

    def to_universal_transverse_mercator(self) -> str:
        """
        Format as UTM: "<zone><band> <easting> <northing>".

        Raises:
            OutOfRangeError: At the poles
        """
        return str(self.utm())

    def to_utm(self) -> str:
        """Alias of to_universal_transverse_mercator."""
        return self.to_universal_transverse_mercator()


def to_dms(
    coordinate: Any,
    template: Optional[str] = None,
    config: ConverterConfig = DEFAULT_CONFIG
) -> str:
    """Format a coordinate as degrees, minutes and seconds."""
    return Converter(coordinate, config).to_dms(template)


def to_dm(
    coordinate: Any,
    template: Optional[str] = None,
    config: ConverterConfig = DEFAULT_CONFIG
) -> str:
    """Format a coordinate as degrees and decimal minutes."""
    return Converter(coordinate, config).to_dm(template)


def to_utm(coordinate: Any, config: ConverterConfig = DEFAULT_CONFIG) -> str:
    """Format a coordinate as a UTM string."""
    return Converter(coordinate, config).to_utm()
