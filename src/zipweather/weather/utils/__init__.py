"""Weather utility classes."""

from zipweather.weather.utils.units import UnitConverter

__all__ = ["UnitConverter"]
