"""Weather API client for OpenWeather current conditions."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from pydantic import ValidationError

from zipweather.settings import ConfigurationError, UserSettings
from zipweather.settings.user import DEFAULT_BASE_URL

from .errors import DecodeError, InvalidLocationError, ProviderError, TransportError
from .models import WeatherRecord

logger: Final = logging.getLogger(__name__)

# The provider only accepts the five-digit part of a postal code.
ZIP_LENGTH: Final = 5

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the location identifier",
    401: "Invalid or missing API key",
    403: "Account blocked / key revoked",
    404: "Location returned no data",
    429: "Rate limit exceeded",
    500: "OpenWeather internal error",
    502: "Bad gateway at OpenWeather",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class WeatherAPI:
    """OpenWeather client for the current-weather endpoint.

    Issues exactly one GET per call and turns the raw JSON into a
    WeatherRecord. Holds configuration only, so a single instance can be
    shared by any number of worker threads.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
    ) -> None:
        """Initialize the weather API client.

        Args:
            api_key: OpenWeather API key
            base_url: Current-weather endpoint
            timeout: Timeout for API requests in seconds

        Raises:
            ConfigurationError: If the key or endpoint is missing
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("OpenWeather API key is not configured")
        if not base_url or not base_url.strip():
            raise ConfigurationError("OpenWeather endpoint is not configured")
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: UserSettings) -> WeatherAPI:
        return cls(settings.api_key, settings.base_url, settings.timeout)

    @staticmethod
    def normalize_location(location_id: str) -> str:
        """Trim a location identifier to the form OpenWeather accepts.

        Raises:
            InvalidLocationError: If the identifier is empty
        """
        if not location_id or not location_id.strip():
            raise InvalidLocationError(location_id)
        return location_id[:ZIP_LENGTH]

    def fetch_weather(self, location_id: str) -> WeatherRecord:
        """Retrieve current conditions for one location.

        Args:
            location_id: Postal code; only the first five characters are sent

        Returns:
            Validated WeatherRecord

        Raises:
            InvalidLocationError: When the identifier is empty
            TransportError: When the connection fails or times out
            ProviderError: When OpenWeather answers with a non-200 status
            DecodeError: When the body is not a valid current-weather payload
        """
        params = {
            "zip": self.normalize_location(location_id),
            "appid": self.api_key,
        }
        logger.debug("Requesting weather for %s", params["zip"])

        try:
            resp = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Weather API network error for %s: %s", location_id, exc)
            raise TransportError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            body: dict[str, Any] = {}
            try:
                parsed = resp.json()
                if isinstance(parsed, dict):
                    body = parsed
            except ValueError:
                pass
            body.setdefault(
                "message", HTTP_ERROR_MAP.get(resp.status_code, resp.text)
            )
            logger.error(
                "Weather API error for %s: %s - %s",
                location_id,
                resp.status_code,
                body["message"],
            )
            raise ProviderError.from_response(body, resp.status_code)

        try:
            record = WeatherRecord.model_validate_json(resp.text)
        except ValidationError as exc:
            logger.warning("Could not decode weather for %s: %s", location_id, exc)
            raise DecodeError(f"Malformed response: {exc}", exc) from exc

        logger.debug("Received weather for %s (%s)", location_id, record.name)
        return record
