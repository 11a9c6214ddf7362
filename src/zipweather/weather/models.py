"""Typed models for OpenWeather current-weather (2.5) responses.

Raw provider values are stored untouched; display units are derived on
each access so a record never changes after it is decoded.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from zipweather.utils.time import TimeUtils
from zipweather.weather.utils.units import UnitConverter

# ─────────────────────────── primitives ──────────────────────────────────────


class OWMModel(BaseModel):
    """Immutable base for response blocks; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Coord(OWMModel):
    """Geographic coordinates (latitude, longitude)."""

    lat: float
    lon: float


class WeatherCondition(OWMModel):
    """Weather condition information from OpenWeather."""

    id: int
    main: str
    description: str
    icon: str


class MainReadings(OWMModel):
    """Temperatures in Kelvin, humidity in %, pressure in hPa."""

    temp: float
    temp_min: float
    temp_max: float
    humidity: float
    pressure: float


class SystemInfo(OWMModel):
    country: str
    sunrise: int
    sunset: int


class Wind(OWMModel):
    speed: float
    deg: float = 0.0


class Clouds(OWMModel):
    all: float


# ─────────────────────────── top-level response ──────────────────────────────


class WeatherRecord(OWMModel):
    """One location's observation as returned by OpenWeather.

    The conversion properties are computed from the raw fields on every
    access; the model is frozen so they cannot be cached back into it.
    ``temp_min <= temp <= temp_max`` is not checked here.
    """

    dt: int
    id: int
    name: str
    cod: int
    coord: Coord
    main: MainReadings
    sys: SystemInfo
    wind: Wind
    clouds: Clouds
    weather: list[WeatherCondition]

    @property
    def country(self) -> str:
        return self.sys.country

    @property
    def primary_condition(self) -> WeatherCondition | None:
        """Get the primary weather condition.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.weather[0] if self.weather else None

    @property
    def temperature(self) -> float:
        """Current temperature in °F."""
        return UnitConverter.kelvin_to_fahrenheit(self.main.temp)

    @property
    def low(self) -> int:
        """Daily low in °F, rounded down."""
        return UnitConverter.low_fahrenheit(self.main.temp_min)

    @property
    def high(self) -> int:
        """Daily high in °F, rounded up."""
        return UnitConverter.high_fahrenheit(self.main.temp_max)

    @property
    def wind_mph(self) -> float:
        return UnitConverter.mps_to_mph(self.wind.speed)

    @property
    def observed_at(self) -> datetime:
        """Observation time in the system's local zone."""
        return TimeUtils.epoch_to_local(self.dt)

    @property
    def sunrise_at(self) -> datetime:
        return TimeUtils.epoch_to_local(self.sys.sunrise)

    @property
    def sunset_at(self) -> datetime:
        return TimeUtils.epoch_to_local(self.sys.sunset)

    def summary(self) -> str:
        """Short three-line rendering (name, current, high/low)."""
        from zipweather.utils.formatting import summary

        return summary(self)

    def detail(
        self, timezone_name: str | None = None, time_format: str | None = None
    ) -> str:
        """Full multi-line rendering; see ``utils.formatting.detail``."""
        from zipweather.utils.formatting import DEFAULT_TIME_FORMAT, detail

        return detail(self, timezone_name, time_format or DEFAULT_TIME_FORMAT)
