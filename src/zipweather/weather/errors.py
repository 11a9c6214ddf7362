"""Exception classes for weather API interactions.

This module defines a hierarchy of exception classes for the failure
kinds a single location fetch can produce. The batch fetcher captures
these per location instead of letting them escape.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class WeatherAPIError(Exception):
    """Error during an OpenWeather request or response parsing.

    Base class for every failure that is reported as a per-location
    outcome. Includes the HTTP status (or 0 when no response was
    received) and the raw response details when available.
    """

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 for local failures
            message: Human-readable error message
            response: Optional raw API response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def kind(self) -> str:
        """Short label for the failure kind, used in report output."""
        return type(self).__name__


class TransportError(WeatherAPIError):
    """Raised when the connection fails or times out."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class ProviderError(WeatherAPIError):
    """Raised when OpenWeather answers with a non-success status."""

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> ProviderError:
        """Create an error from an API response.

        Args:
            response: API response dictionary
            status_code: HTTP status code

        Returns:
            Appropriate ProviderError subclass
        """
        if 400 <= status_code < 500:
            if status_code == 401 or status_code == 403:
                return AuthenticationError(
                    status_code,
                    response.get("message", "Authentication failed"),
                    response,
                )
            elif status_code == 404:
                return NotFoundError(
                    status_code, response.get("message", "Location not found"), response
                )
            elif status_code == 429:
                return RateLimitError(
                    status_code, response.get("message", "Rate limit exceeded"), response
                )
            return ClientError(
                status_code, response.get("message", "Client error"), response
            )
        elif status_code >= 500:
            return ServerError(
                status_code, response.get("message", "Server error"), response
            )

        return cls(status_code, response.get("message", "Unknown error"), response)


class AuthenticationError(ProviderError):
    """Raised when API authentication fails (invalid API key)."""

    pass


class NotFoundError(ProviderError):
    """Raised when the provider does not know the location."""

    pass


class RateLimitError(ProviderError):
    """Raised when rate limits are exceeded."""

    pass


class ClientError(ProviderError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(ProviderError):
    """Raised for 5xx server errors."""

    pass


class DecodeError(WeatherAPIError):
    """Raised when the response body cannot be parsed into a WeatherRecord."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class InvalidLocationError(WeatherAPIError):
    """Raised for an empty location identifier; no request is sent."""

    def __init__(self, location_id: str) -> None:
        super().__init__(0, f"Invalid location identifier: {location_id!r}")
        self.location_id = location_id


class BatchTimeoutError(WeatherAPIError):
    """Raised in place of a result that missed the batch deadline."""

    def __init__(self, location_id: str, timeout: float) -> None:
        super().__init__(
            0, f"No result for {location_id!r} within {timeout:g}s batch timeout"
        )
        self.location_id = location_id
        self.timeout = timeout
