"""
UTM projection result.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UTMResult:
    """
    Projected UTM position.

    Attributes:
        zone: UTM zone number (1-60)
        band: Latitude band letter
        easting: Easting in meters, false easting included
        northing: Northing in meters, southern offset included
    """
    zone: int
    band: str
    easting: float
    northing: float

    @property
    def grid_zone(self) -> str:
        """Zone number and band letter, e.g. '31U'."""
        return f"{self.zone}{self.band}"

    def __str__(self) -> str:
        # Meters truncated toward zero, like printf %d
        return f"{self.grid_zone} {int(self.easting)} {int(self.northing)}"
