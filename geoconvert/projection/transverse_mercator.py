"""
Transverse Mercator (UTM) forward projection.

Projects WGS84 lat/lon onto the UTM grid using the ellipsoidal
Transverse Mercator series expanded to 8th order in the longitude
difference, with the meridian arc computed from the third flattening.
Ellipsoid and grid parameters come from an explicit ConverterConfig.
"""

from typing import Any
import logging
import math

from ..config import (
    ConverterConfig,
    DEFAULT_CONFIG,
    LATITUDE_BAND_HEIGHT,
    LATITUDE_BAND_ORIGIN,
    UTM_ZONE_COUNT,
    UTM_ZONE_WIDTH,
)
from ..errors import OutOfRangeError
from ..models.coordinate import as_coordinate
from ..models.utm import UTMResult
from ..utils.math_utils import clamp_index

logger = logging.getLogger(__name__)


def utm_zone(longitude: float) -> int:
    """
    UTM zone number for a longitude.

    Longitude 180 belongs to zone 60, not to a 61st zone.

    Args:
        longitude: Longitude in degrees [-180, 180]

    Returns:
        Zone number in [1, 60]
    """
    zone = math.floor((longitude + 180.0) / UTM_ZONE_WIDTH) + 1
    return clamp_index(zone - 1, UTM_ZONE_COUNT) + 1


def central_meridian(zone: int) -> float:
    """Central meridian of a UTM zone, in degrees."""
    return -183.0 + zone * UTM_ZONE_WIDTH


def latitude_band(latitude: float, bands: str = DEFAULT_CONFIG.latitude_bands) -> str:
    """
    Latitude band letter.

    Latitudes outside the banded range (-80 to 84) are clamped to the
    first or last band.

    Args:
        latitude: Latitude in degrees
        bands: Band letter table, southernmost first

    Returns:
        Single band letter
    """
    index = math.floor((latitude - LATITUDE_BAND_ORIGIN) / LATITUDE_BAND_HEIGHT)
    clamped = clamp_index(index, len(bands))
    if clamped != index:
        logger.debug(
            f"Latitude {latitude} outside band table, using band {bands[clamped]}"
        )
    return bands[clamped]


class UTMProjector:
    """
    Forward UTM projection.

    Attributes:
        config: Ellipsoid, scale factor, offsets and band table
    """

    def __init__(self, config: ConverterConfig = DEFAULT_CONFIG):
        self.config = config

        a = config.ellipsoid.semi_major
        b = config.ellipsoid.semi_minor

        self.a = a
        self.b = b
        self.ep2 = config.ellipsoid.second_eccentricity_squared

        # Meridian arc coefficients
        n = config.ellipsoid.third_flattening
        self.alpha = ((a + b) / 2.0) * (1.0 + n ** 2 / 4.0 + n ** 4 / 64.0)
        self.beta = -3.0 * n / 2.0 + 9.0 * n ** 3 / 16.0 - 3.0 * n ** 5 / 32.0
        self.gamma = 15.0 * n ** 2 / 16.0 - 15.0 * n ** 4 / 32.0
        self.delta = -35.0 * n ** 3 / 48.0 + 105.0 * n ** 5 / 256.0
        self.epsilon = 315.0 * n ** 4 / 512.0

    def meridian_arc(self, phi: float) -> float:
        """Meridian arc length from the equator to latitude phi (radians)."""
        return self.alpha * (
            phi
            + self.beta * math.sin(2.0 * phi)
            + self.gamma * math.sin(4.0 * phi)
            + self.delta * math.sin(6.0 * phi)
            + self.epsilon * math.sin(8.0 * phi)
        )

    def project(self, coordinate: Any) -> UTMResult:
        """
        Project a coordinate onto the UTM grid.

        Args:
            coordinate: Coordinate, object with latitude/longitude, or pair

        Returns:
            UTMResult with zone, band, easting and northing in meters

        Raises:
            OutOfRangeError: At the poles, where tan(phi) diverges
        """
        coordinate = as_coordinate(coordinate)
        lat = coordinate.latitude
        lon = coordinate.longitude

        if abs(lat) >= 90.0:
            raise OutOfRangeError(
                f"UTM is undefined at the poles (latitude {lat})"
            )

        phi = math.radians(lat)
        lam = math.radians(lon)

        zone = utm_zone(lon)
        lam0 = math.radians(central_meridian(zone))

        cos_phi = math.cos(phi)
        nu2 = self.ep2 * cos_phi ** 2
        N = self.a ** 2 / (self.b * math.sqrt(1.0 + nu2))
        t = math.tan(phi)
        t2 = t * t
        l = lam - lam0

        l3coef = 1.0 - t2 + nu2
        l4coef = 5.0 - t2 + 9.0 * nu2 + 4.0 * (nu2 * nu2)
        l5coef = 5.0 - 18.0 * t2 + (t2 * t2) + 14.0 * nu2 - 58.0 * t2 * nu2
        l6coef = 61.0 - 58.0 * t2 + (t2 * t2) + 270.0 * nu2 - 330.0 * t2 * nu2
        l7coef = 61.0 - 479.0 * t2 + 179.0 * (t2 * t2) - (t2 * t2 * t2)
        l8coef = 1385.0 - 3111.0 * t2 + 543.0 * (t2 * t2) - (t2 * t2 * t2)

        easting = (
            N * cos_phi * l
            + (N / 6.0 * cos_phi ** 3 * l3coef * l ** 3)
            + (N / 120.0 * cos_phi ** 5 * l5coef * l ** 5)
            + (N / 5040.0 * cos_phi ** 7 * l7coef * l ** 7)
        )

        northing = (
            self.meridian_arc(phi)
            + (t / 2.0 * N * cos_phi ** 2 * l ** 2)
            + (t / 24.0 * N * cos_phi ** 4 * l4coef * l ** 4)
            + (t / 720.0 * N * cos_phi ** 6 * l6coef * l ** 6)
            + (t / 40320.0 * N * cos_phi ** 8 * l8coef * l ** 8)
        )

        easting = easting * self.config.scale_factor + self.config.false_easting
        northing = northing * self.config.scale_factor

        # Southern hemisphere offset
        if northing < 0.0:
            northing += self.config.false_northing

        band = latitude_band(lat, self.config.latitude_bands)

        logger.debug(
            f"Projected ({lat}, {lon}) -> zone {zone}{band} "
            f"E={easting:.3f} N={northing:.3f}"
        )

        return UTMResult(zone=zone, band=band, easting=easting, northing=northing)
