"""
Decimal-degree decomposition into degrees, minutes and seconds.

The sign is kept apart from the magnitude so templates can render it
either as a leading '-' or as a hemisphere letter.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
import math

from ..config import DECIMAL_MINUTES_PRECISION, DECIMAL_MINUTES_ROUNDING
from ..errors import OutOfRangeError
from ..models.angle import DecomposedAngle


def round_half(value: float, digits: int = 0, rounding: str = ROUND_HALF_UP) -> Decimal:
    """
    Round a float to a fixed number of decimal digits.

    The float is converted through its shortest repr, so a value printed
    as 26.771665 is treated as an exact halfway case.

    Args:
        value: Value to round
        digits: Number of decimal digits to keep
        rounding: A decimal.ROUND_* constant (default half away from zero)

    Returns:
        Rounded Decimal
    """
    exponent = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Room for the integer part plus every requested digit
        ctx.prec = max(ctx.prec, digits + 20)
        return Decimal(repr(value)).quantize(exponent, rounding=rounding)


def format_decimal(value: Decimal) -> str:
    """Plain decimal string without exponent or trailing zeros."""
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text or '0'


def decompose(
    value: float,
    precision: int = DECIMAL_MINUTES_PRECISION,
    rounding: str = DECIMAL_MINUTES_ROUNDING
) -> DecomposedAngle:
    """
    Split a decimal-degree value into sexagesimal parts.

    Degrees and minutes are truncated, seconds are rounded to the
    nearest integer, and decimal minutes are rounded to ``precision``
    digits using ``rounding``.

    Args:
        value: Angle in decimal degrees
        precision: Decimal-minutes digits
        rounding: Decimal-minutes rounding mode, a decimal.ROUND_* constant

    Returns:
        DecomposedAngle

    Raises:
        OutOfRangeError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise OutOfRangeError(f"Cannot decompose non-finite value {value}")

    abs_value = abs(value)
    degrees = math.floor(abs_value)

    minutes_float = (abs_value - degrees) * 60
    minutes = math.floor(minutes_float)

    decimal_minutes = round_half(minutes_float, precision, rounding)
    seconds = int(round_half((minutes_float - minutes) * 60))

    return DecomposedAngle(
        positive=value >= 0,
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        decimal_minutes=format_decimal(decimal_minutes),
    )
