"""
DMS/DM decomposition, template rendering and the conversion facade.
"""

from .decomposer import decompose, round_half, format_decimal
from .renderer import (
    DM_PLACEHOLDERS,
    DMS_PLACEHOLDERS,
    LATITUDE,
    LONGITUDE,
    render,
)
from .converter import Converter, to_dm, to_dms, to_utm

__all__ = [
    'decompose', 'round_half', 'format_decimal',
    'DM_PLACEHOLDERS', 'DMS_PLACEHOLDERS', 'LATITUDE', 'LONGITUDE', 'render',
    'Converter', 'to_dm', 'to_dms', 'to_utm',
]
