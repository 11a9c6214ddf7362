"""Common utility functions and helpers for the zipweather package."""

from zipweather.utils.formatting import format_number, format_percentage, format_temperature
from zipweather.utils.time import TimeUtils
from zipweather.utils.timing import timed

__all__ = [
    "TimeUtils",
    "format_number",
    "format_percentage",
    "format_temperature",
    "timed",
]
