"""
geoconvert

Converts WGS84 decimal-degree coordinates to Degrees-Minutes-Seconds,
Decimal-Minutes and Universal Transverse Mercator representations.

Can be used as:
- Library: from geoconvert import Converter
- CLI tool: python -m geoconvert.main LAT LON
"""

__version__ = "0.1.0"

from .config import ConverterConfig, DEFAULT_CONFIG, Ellipsoid, WGS84
from .errors import GeoConvertError, OutOfRangeError
from .models import Coordinate, DecomposedAngle, UTMResult
from .convert import Converter, decompose, render, to_dm, to_dms, to_utm
from .projection import IProjector, UTMProjector, create_projector

__all__ = [
    '__version__',
    'ConverterConfig', 'DEFAULT_CONFIG', 'Ellipsoid', 'WGS84',
    'GeoConvertError', 'OutOfRangeError',
    'Coordinate', 'DecomposedAngle', 'UTMResult',
    'Converter', 'decompose', 'render', 'to_dm', 'to_dms', 'to_utm',
    'IProjector', 'UTMProjector', 'create_projector',
]
