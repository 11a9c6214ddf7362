"""Text and number formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from zipweather.utils.time import TimeUtils
from zipweather.weather.utils.units import UnitConverter

if TYPE_CHECKING:
    from zipweather.weather.models import WeatherRecord

ICON_URL: Final = "http://openweathermap.org/img/w/{icon}.png"
DEFAULT_TIME_FORMAT: Final = "%b %-d, %Y, %-I:%M:%S %p"


def format_number(value: float, max_digits: int = 3) -> str:
    """Format a number with grouping and at most ``max_digits`` decimals.

    Trailing zeros are dropped, so 72.50 renders as "72.5" and 32.0 as "32".
    """
    s = f"{value:,.{max_digits}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def format_temperature(temp: float, unit: str = "F") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string
    """
    return f"{format_number(temp)} {unit}"


def format_percentage(value: float) -> str:
    """Format a 0-100 value as percentage."""
    return f"{format_number(value)}%"


def summary(record: WeatherRecord) -> str:
    """Three-line overview: name, current temperature, high and low."""
    return "\n".join(
        [
            record.name,
            f"    Current: {format_temperature(record.temperature)}",
            f"    High: {record.high} F, Low: {record.low} F",
        ]
    )


def detail(
    record: WeatherRecord,
    timezone_name: str | None = None,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> str:
    """Full multi-line report for one location.

    Args:
        record: Decoded observation
        timezone_name: Zone for the displayed times (system zone when None)
        time_format: strftime format for the displayed times

    Returns:
        Rendered report text
    """

    def when(ts: int) -> str:
        return TimeUtils.format_datetime(
            TimeUtils.epoch_to_local(ts, timezone_name), time_format
        )

    condition = record.primary_condition
    description = condition.description if condition else "n/a"
    icon = ICON_URL.format(icon=condition.icon) if condition else "n/a"
    deg = record.wind.deg

    lines = [
        f"For {record.name}, as of {when(record.dt)}:",
        f"Description  : {description}",
        f"Icon         : {icon}",
        f"Current Temp : {format_temperature(record.temperature)}"
        f" (high: {record.high} F, low: {record.low} F)",
        f"Humidity     : {format_percentage(record.main.humidity)}",
        f"Pressure     : {format_number(record.main.pressure)} hPa"
        f" ({UnitConverter.hpa_to_inhg(record.main.pressure):.2f} inHg)",
        f"Sunrise      : {when(record.sys.sunrise)}",
        f"Sunset       : {when(record.sys.sunset)}",
        f"Wind         : {format_number(record.wind_mph)} mph at"
        f" {format_number(deg)} deg ({UnitConverter.deg_to_cardinal(deg)})",
        f"Cloudiness   : {format_percentage(record.clouds.all)}",
    ]
    return "\n".join(lines)
