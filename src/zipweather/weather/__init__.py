"""Weather package - holds API client, batch fetcher, models and custom errors."""

from .api import WeatherAPI
from .batch import BatchFetcher, FetchMode, FetchOutcome, WeatherFetcher
from .errors import (
    AuthenticationError,
    BatchTimeoutError,
    ClientError,
    DecodeError,
    InvalidLocationError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    ServerError,
    TransportError,
    WeatherAPIError,
)
from .models import WeatherCondition, WeatherRecord
from .utils import UnitConverter

# Define what gets imported with: from zipweather.weather import *
__all__ = [
    "AuthenticationError",
    "BatchFetcher",
    "BatchTimeoutError",
    "ClientError",
    "DecodeError",
    "FetchMode",
    "FetchOutcome",
    "InvalidLocationError",
    "NotFoundError",
    "ProviderError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnitConverter",
    "WeatherAPI",
    "WeatherAPIError",
    "WeatherCondition",
    "WeatherFetcher",
    "WeatherRecord",
]
