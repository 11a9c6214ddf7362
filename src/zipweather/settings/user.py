"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from .env file(s)
load_dotenv()

DEFAULT_BASE_URL: Final = "http://api.openweathermap.org/data/2.5/weather"
DEFAULT_LOCATIONS: Final = ("06447", "96801", "02115")


class ConfigurationError(RuntimeError):
    """Raised when no fetch can proceed because configuration is missing."""


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Settings for the weather report, overridable in config.yaml.

    Loaded once at start-up and passed to the API client; nothing reads
    configuration from global state.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/zipweather/config.yaml").expanduser(),
        Path("/etc/zipweather/config.yaml"),
    ]

    # Provider settings
    api_key: str = Field(..., min_length=10, description="OpenWeather API key")
    base_url: str = Field(
        DEFAULT_BASE_URL, min_length=1, description="Current-weather endpoint"
    )
    timeout: float = Field(10, gt=0, description="Per-request timeout (seconds)")

    # Batch settings
    locations: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LOCATIONS),
        description="Postal codes reported when none are given on the command line",
    )
    max_workers: int | None = Field(
        None, ge=1, description="Concurrent fetch cap; one worker per location if null"
    )
    batch_timeout: float | None = Field(
        None, gt=0, description="Deadline for a concurrent batch (seconds)"
    )

    # Display settings
    timezone: str | None = Field(
        None, description="Zone for displayed times; the system zone if null"
    )
    time_format: str = Field(
        "%b %-d, %Y, %-I:%M:%S %p", description="Displayed date/time format"
    )

    # ---- validators ----
    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {v!r}") from exc
        return v

    @field_validator("locations")
    @classmethod
    def validate_locations(cls, v: list[str]) -> list[str]:
        if any(not loc.strip() for loc in v):
            raise ValueError("locations cannot contain empty entries")
        return v

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("ZIPWEATHER_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from ZIPWEATHER_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set ZIPWEATHER_CONFIG."
                    )

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
