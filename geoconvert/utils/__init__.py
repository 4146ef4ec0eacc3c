"""
Utility functions for geoconvert.
"""

from .math_utils import clamp, clamp_index

__all__ = [
    'clamp',
    'clamp_index',
]
