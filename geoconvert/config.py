"""
Configuration constants for geoconvert.

Contains the default output templates, decimal-minutes rounding rules,
ellipsoid parameters and UTM grid settings used by the converters.
"""

from dataclasses import dataclass, field
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)


# =============================================================================
# FORMAT TOKENS
# =============================================================================

# Latitude placeholders
LATITUDE_SIGN = '%P'
LATITUDE_DIRECTION = '%L'
LATITUDE_DEGREES = '%D'
LATITUDE_MINUTES = '%M'
LATITUDE_SECONDS = '%S'
LATITUDE_DECIMAL_MINUTES = '%N'

# Longitude placeholders
LONGITUDE_SIGN = '%p'
LONGITUDE_DIRECTION = '%l'
LONGITUDE_DEGREES = '%d'
LONGITUDE_MINUTES = '%m'
LONGITUDE_SECONDS = '%s'
LONGITUDE_DECIMAL_MINUTES = '%n'

# =============================================================================
# DEFAULT TEMPLATES
# =============================================================================

# e.g. 40°26′46″N, 79°56′56″W
DEFAULT_DMS_FORMAT = '%D°%M′%S″%L, %d°%m′%s″%l'

# e.g. 40 26.7717N, -79 56.93172W
DEFAULT_DM_FORMAT = '%P%D %N%L, %p%d %n%l'

# =============================================================================
# DECIMAL MINUTES ROUNDING
# =============================================================================

# Number of decimal digits kept in decimal minutes
DECIMAL_MINUTES_PRECISION = 5
MAX_DECIMAL_MINUTES_PRECISION = 15  # float repr carries at most 17 significant digits

# Half away from zero
DECIMAL_MINUTES_ROUNDING = ROUND_HALF_UP

ROUNDING_MODES = frozenset({
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
})

# =============================================================================
# ELLIPSOID
# =============================================================================

# WGS84 axes (meters)
EARTH_RADIUS_MAJOR = 6378137.0
EARTH_RADIUS_MINOR = 6356752.3142

# =============================================================================
# UTM GRID
# =============================================================================

UTM_SCALE_FACTOR = 0.9996

# Offsets (meters)
UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING = 10000000.0  # southern hemisphere only

UTM_ZONE_COUNT = 60
UTM_ZONE_WIDTH = 6.0  # degrees of longitude

# Latitude bands from -80 to +84, 8 degrees each (X is stretched to 12)
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWX'
LATITUDE_BAND_ORIGIN = -80.0
LATITUDE_BAND_HEIGHT = 8.0


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid described by its two semi-axes.

    Attributes:
        semi_major: Equatorial radius a (meters)
        semi_minor: Polar radius b (meters)
    """
    semi_major: float = EARTH_RADIUS_MAJOR
    semi_minor: float = EARTH_RADIUS_MINOR

    def __post_init__(self):
        """Validate axes."""
        if self.semi_minor <= 0:
            raise ValueError("semi_minor must be positive")

        if self.semi_major < self.semi_minor:
            raise ValueError("semi_major must not be smaller than semi_minor")

    @property
    def second_eccentricity_squared(self) -> float:
        """e'^2 = (a^2 - b^2) / b^2."""
        a2 = self.semi_major ** 2
        b2 = self.semi_minor ** 2
        return (a2 - b2) / b2

    @property
    def third_flattening(self) -> float:
        """n = (a - b) / (a + b)."""
        return (
            (self.semi_major - self.semi_minor)
            / (self.semi_major + self.semi_minor)
        )


WGS84 = Ellipsoid()


@dataclass(frozen=True)
class ConverterConfig:
    """
    Runtime configuration for DMS/DM formatting and UTM projection.

    Instances are immutable; derive variants with dataclasses.replace().
    """

    # Templates
    dms_format: str = DEFAULT_DMS_FORMAT
    dm_format: str = DEFAULT_DM_FORMAT

    # Decimal minutes
    decimal_minutes_precision: int = DECIMAL_MINUTES_PRECISION
    decimal_minutes_rounding: str = DECIMAL_MINUTES_ROUNDING

    # Projection
    ellipsoid: Ellipsoid = field(default_factory=Ellipsoid)
    scale_factor: float = UTM_SCALE_FACTOR
    false_easting: float = UTM_FALSE_EASTING
    false_northing: float = UTM_FALSE_NORTHING
    latitude_bands: str = LATITUDE_BANDS

    def __post_init__(self):
        """Validate configuration values."""
        if not 0 <= self.decimal_minutes_precision <= MAX_DECIMAL_MINUTES_PRECISION:
            raise ValueError(
                f"decimal_minutes_precision must be between 0 and "
                f"{MAX_DECIMAL_MINUTES_PRECISION}, got {self.decimal_minutes_precision}"
            )

        if self.decimal_minutes_rounding not in ROUNDING_MODES:
            raise ValueError(
                f"Unknown rounding mode: {self.decimal_minutes_rounding!r}"
            )

        if self.scale_factor <= 0:
            raise ValueError("scale_factor must be positive")

        if len(self.latitude_bands) != len(LATITUDE_BANDS):
            raise ValueError(
                f"latitude_bands must have exactly {len(LATITUDE_BANDS)} "
                f"entries, got {len(self.latitude_bands)}"
            )


# Default configuration instance
DEFAULT_CONFIG = ConverterConfig()
