"""
Decomposed angle produced by the DMS/DM decomposer.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DecomposedAngle:
    """
    A decimal-degree value split into sexagesimal parts.

    Attributes:
        positive: True if the original value was >= 0
        degrees: Whole degrees of the absolute value
        minutes: Whole minutes (truncated)
        seconds: Seconds rounded to the nearest integer
        decimal_minutes: Minutes with fraction, as a plain decimal string
    """
    positive: bool
    degrees: int
    minutes: int
    seconds: int
    decimal_minutes: str

    @property
    def sign(self) -> str:
        """'' for positive values, '-' for negative ones."""
        return '' if self.positive else '-'

    def to_decimal(self) -> float:
        """Rebuild the signed decimal-degree value from degrees/minutes/seconds."""
        value = self.degrees + self.minutes / 60.0 + self.seconds / 3600.0
        return value if self.positive else -value
