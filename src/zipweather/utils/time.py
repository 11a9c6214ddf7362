# src/zipweather/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo


class TimeUtils:
    """Time-related utility functions.

    OpenWeather reports every instant as UTC epoch seconds; these helpers
    project them into a display zone on demand.
    """

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def epoch_to_local(timestamp: int, timezone_name: str | None = None) -> datetime:
        """Convert UNIX timestamp to the caller's local time.

        Args:
            timestamp: UNIX timestamp (seconds since epoch, UTC)
            timezone_name: IANA zone name; the system zone when None

        Returns:
            Timezone-aware datetime in the requested zone
        """
        utc = TimeUtils.epoch_to_datetime(timestamp)
        if timezone_name is None:
            return utc.astimezone()
        return utc.astimezone(ZoneInfo(timezone_name))

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string.

        Args:
            dt: Datetime to format
            format_string: strftime format string

        Returns:
            Formatted datetime string
        """
        return dt.strftime(format_string)
