"""
Exception types for geoconvert.
"""


class GeoConvertError(Exception):
    """Base class for conversion errors."""


class OutOfRangeError(GeoConvertError, ValueError):
    """
    Input lies outside the domain a conversion can handle.

    Raised for latitudes/longitudes outside geographic range, non-finite
    values, and latitudes at the poles where the UTM series diverges.
    """
