"""
Template rendering for DMS and DM strings.

Templates carry placeholder tokens (see config.py) that are replaced
with fields of the decomposed latitude and longitude in a single pass.
Replaced text is never scanned again, and tokens with no mapping are
left as they are.
"""

from typing import Dict, Mapping, Tuple
import re

from ..config import (
    LATITUDE_SIGN,
    LATITUDE_DIRECTION,
    LATITUDE_DEGREES,
    LATITUDE_MINUTES,
    LATITUDE_SECONDS,
    LATITUDE_DECIMAL_MINUTES,
    LONGITUDE_SIGN,
    LONGITUDE_DIRECTION,
    LONGITUDE_DEGREES,
    LONGITUDE_MINUTES,
    LONGITUDE_SECONDS,
    LONGITUDE_DECIMAL_MINUTES,
)
from ..models.angle import DecomposedAngle

LATITUDE = 'latitude'
LONGITUDE = 'longitude'

# (positive, negative) hemisphere letters
HEMISPHERES = {
    LATITUDE: ('N', 'S'),
    LONGITUDE: ('E', 'W'),
}

FIELDS = frozenset({
    'sign', 'direction', 'degrees', 'minutes', 'seconds', 'decimal_minutes',
})

# Token -> (axis, field)
FieldSelector = Tuple[str, str]

DMS_PLACEHOLDERS: Dict[str, FieldSelector] = {
    LATITUDE_SIGN: (LATITUDE, 'sign'),
    LATITUDE_DIRECTION: (LATITUDE, 'direction'),
    LATITUDE_DEGREES: (LATITUDE, 'degrees'),
    LATITUDE_MINUTES: (LATITUDE, 'minutes'),
    LATITUDE_SECONDS: (LATITUDE, 'seconds'),
    LONGITUDE_SIGN: (LONGITUDE, 'sign'),
    LONGITUDE_DIRECTION: (LONGITUDE, 'direction'),
    LONGITUDE_DEGREES: (LONGITUDE, 'degrees'),
    LONGITUDE_MINUTES: (LONGITUDE, 'minutes'),
    LONGITUDE_SECONDS: (LONGITUDE, 'seconds'),
}

DM_PLACEHOLDERS: Dict[str, FieldSelector] = {
    LATITUDE_SIGN: (LATITUDE, 'sign'),
    LATITUDE_DIRECTION: (LATITUDE, 'direction'),
    LATITUDE_DEGREES: (LATITUDE, 'degrees'),
    LATITUDE_DECIMAL_MINUTES: (LATITUDE, 'decimal_minutes'),
    LONGITUDE_SIGN: (LONGITUDE, 'sign'),
    LONGITUDE_DIRECTION: (LONGITUDE, 'direction'),
    LONGITUDE_DEGREES: (LONGITUDE, 'degrees'),
    LONGITUDE_DECIMAL_MINUTES: (LONGITUDE, 'decimal_minutes'),
}


def field_value(angle: DecomposedAngle, axis: str, name: str) -> str:
    """
    Render one field of a decomposed angle as text.

    Args:
        angle: Decomposed latitude or longitude
        axis: LATITUDE or LONGITUDE, selects the hemisphere letters
        name: One of FIELDS

    Returns:
        Field text
    """
    if name == 'sign':
        return angle.sign
    if name == 'direction':
        positive, negative = HEMISPHERES[axis]
        return positive if angle.positive else negative
    if name == 'decimal_minutes':
        return angle.decimal_minutes
    if name in FIELDS:
        return str(getattr(angle, name))
    raise ValueError(f"Unknown field: {name!r}")


def _token_pattern(tokens) -> re.Pattern:
    # Longest first so overlapping tokens resolve like strtr()
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile('|'.join(re.escape(token) for token in ordered))


def render(
    template: str,
    latitude: DecomposedAngle,
    longitude: DecomposedAngle,
    placeholders: Mapping[str, FieldSelector]
) -> str:
    """
    Substitute decomposed fields into a template.

    Args:
        template: Format string containing placeholder tokens
        latitude: Decomposed latitude
        longitude: Decomposed longitude
        placeholders: Token -> (axis, field) mapping

    Returns:
        Rendered string
    """
    if not placeholders:
        return template

    angles = {LATITUDE: latitude, LONGITUDE: longitude}
    values = {}
    for token, (axis, name) in placeholders.items():
        if not token:
            raise ValueError("Placeholder tokens must be non-empty")
        if axis not in angles:
            raise ValueError(f"Unknown axis for token {token!r}: {axis!r}")
        values[token] = field_value(angles[axis], axis, name)

    pattern = _token_pattern(values)
    return pattern.sub(lambda match: values[match.group(0)], template)
