import json
import threading
import time
from pathlib import Path
from typing import Any

import pytest

from zipweather.settings.user import UserSettings
from zipweather.weather.errors import TransportError
from zipweather.weather.models import WeatherRecord

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return json.loads((DATA_DIR / "current_sample.json").read_text())


@pytest.fixture
def weather_record(sample_payload: dict[str, Any]) -> WeatherRecord:
    return WeatherRecord.model_validate(sample_payload)


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings(api_key="fake-api-key-123", timeout=5)


class StubFetcher:
    """Single-location fetcher with canned results and optional delays."""

    def __init__(
        self,
        payload: dict[str, Any],
        failing: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.payload = payload
        self.failing = failing or set()
        self.delays = delays or {}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def fetch_weather(self, location_id: str) -> WeatherRecord:
        with self._lock:
            self.calls.append(location_id)
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            time.sleep(self.delays.get(location_id, 0))
            if location_id in self.failing:
                raise TransportError(f"Network error: {location_id} unreachable")
            return WeatherRecord.model_validate({**self.payload, "name": location_id})
        finally:
            with self._lock:
                self.active -= 1
                self.completed.append(location_id)


@pytest.fixture
def stub_fetcher(sample_payload: dict[str, Any]) -> StubFetcher:
    return StubFetcher(sample_payload, failing={"96801"})
