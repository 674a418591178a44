"""Shared constants and output units for distance calculations."""

import math
from enum import Enum

# Earth mean radius in kilometers
MEAN_RADIUS_KM = 6371.009

# Statute mile in kilometers
MILES_TO_KM = 1.609344

DEG_TO_RAD = math.pi / 180.0

# WGS84 ellipsoid
WGS84_A = 6378137.0  # equatorial radius (m)
WGS84_F = 1.0 / 298.257223563  # flattening
WGS84_B = WGS84_A * (1.0 - WGS84_F)  # polar radius (m)


class Unit(Enum):
    """Output unit: SI for kilometers, US for miles."""

    SI = "km"
    US = "mi"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Unit":
        """
        Parse a unit name as typed on the command line.

        Accepts "si"/"km" and "us"/"mi", case-insensitive.

        Raises:
            ValueError: if the name is not a known unit
        """
        key = text.strip().lower()
        if key in ("si", "km"):
            return cls.SI
        if key in ("us", "mi"):
            return cls.US
        raise ValueError(f"Unknown unit: {text!r}")


def unit_factor(unit: Unit) -> float:
    """Scale factor applied to a distance in kilometers."""
    return 1.0 if unit == Unit.SI else 1.0 / MILES_TO_KM


def convert_km(km: float, unit: Unit) -> float:
    """Convert a distance in kilometers to the given unit."""
    return km * unit_factor(unit)
