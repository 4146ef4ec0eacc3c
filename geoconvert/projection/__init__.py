"""
Projection module for geoconvert.

Provides a pluggable projection interface and the UTM implementation
for converting geographic (lat/lon) coordinates to grid coordinates.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..config import ConverterConfig, DEFAULT_CONFIG
from ..models.utm import UTMResult
from .transverse_mercator import (
    UTMProjector,
    central_meridian,
    latitude_band,
    utm_zone,
)


class IProjector(ABC):
    """
    Abstract interface for forward coordinate projection.

    Implementations convert WGS84 lat/lon into a projected grid position.
    """

    @abstractmethod
    def project(self, coordinate: Any) -> UTMResult:
        """
        Project geographic coordinates to grid coordinates.

        Args:
            coordinate: Coordinate, object with latitude/longitude, or pair

        Returns:
            Projected position
        """
        pass


IProjector.register(UTMProjector)


def create_projector(config: ConverterConfig = DEFAULT_CONFIG) -> IProjector:
    """
    Factory function to create the default projector.

    Args:
        config: Ellipsoid and UTM grid configuration

    Returns:
        IProjector implementation
    """
    return UTMProjector(config)


__all__ = [
    'IProjector',
    'UTMProjector',
    'central_meridian',
    'create_projector',
    'latitude_band',
    'utm_zone',
]
