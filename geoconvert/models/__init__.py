"""
Data models for geoconvert.
"""

from .coordinate import Coordinate, as_coordinate
from .angle import DecomposedAngle
from .utm import UTMResult

__all__ = [
    'Coordinate', 'as_coordinate',
    'DecomposedAngle',
    'UTMResult',
]
