"""Weather unit conversion utilities."""

from __future__ import annotations

import math
from typing import ClassVar, Final

ABSOLUTE_ZERO_C: Final = 273.15

# 1 m/s * 60 s/min * 60 min/h * 100 cm/m / 2.54 cm/in / 12 in/ft / 5280 ft/mi
MPS_TO_MPH: Final = 60 * 60 * 100 / 2.54 / 12 / 5280


class UnitConverter:
    """Weather unit conversion utilities.

    OpenWeather's current-weather endpoint reports in standard units
    unless asked otherwise:
    - Temperature in Kelvin
    - Wind speed in metres per second
    - Pressure in hPa

    Every helper is a pure function of its argument.
    """

    # Wind direction constants
    DIRECTIONS: ClassVar[list[str]] = [
        "N",
        "NNE",
        "NE",
        "ENE",
        "E",
        "ESE",
        "SE",
        "SSE",
        "S",
        "SSW",
        "SW",
        "WSW",
        "W",
        "WNW",
        "NW",
        "NNW",
    ]

    @staticmethod
    def kelvin_to_fahrenheit(kelvin: float) -> float:
        """Convert an absolute temperature to degrees Fahrenheit."""
        return 9 * (kelvin - ABSOLUTE_ZERO_C) / 5 + 32

    @staticmethod
    def mps_to_mph(mps: float) -> float:
        """Convert metres per second to miles per hour."""
        return mps * MPS_TO_MPH

    @staticmethod
    def hpa_to_inhg(hpa: float) -> float:
        """Convert pressure hPa → inches Hg (2 dp)."""
        return round(hpa * 0.02953, 2)

    @classmethod
    def deg_to_cardinal(cls, deg: float) -> str:
        """Convert wind bearing to 16-point compass direction."""
        return cls.DIRECTIONS[int((deg % 360) / 22.5 + 0.5) % 16]

    @classmethod
    def low_fahrenheit(cls, kelvin: float) -> int:
        """Display value for a daily low, rounded down."""
        return math.floor(cls.kelvin_to_fahrenheit(kelvin))

    @classmethod
    def high_fahrenheit(cls, kelvin: float) -> int:
        """Display value for a daily high, rounded up."""
        return math.ceil(cls.kelvin_to_fahrenheit(kelvin))
