import json
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from zipweather.settings import ConfigurationError, UserSettings
from zipweather.weather.api import WeatherAPI
from zipweather.weather.errors import (
    AuthenticationError,
    DecodeError,
    InvalidLocationError,
    NotFoundError,
    ProviderError,
    ServerError,
    TransportError,
)
from zipweather.weather.models import WeatherRecord


@pytest.fixture
def api(settings: UserSettings) -> WeatherAPI:
    return WeatherAPI.from_settings(settings)


def _response(status: int, body: Any) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.text = body if isinstance(body, str) else json.dumps(body)
    if isinstance(body, str):
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = body
    return resp


def test_fetch_weather_success(api: WeatherAPI, sample_payload: dict[str, Any]) -> None:
    with patch("zipweather.weather.api.requests.get") as mock_get:
        mock_get.return_value = _response(200, sample_payload)

        result = api.fetch_weather("06447")

    assert isinstance(result, WeatherRecord)
    assert result.name == "Middletown"
    mock_get.assert_called_once_with(
        "http://api.openweathermap.org/data/2.5/weather",
        params={"zip": "06447", "appid": "fake-api-key-123"},
        timeout=5,
    )


def test_location_truncated_to_five_characters(
    api: WeatherAPI, sample_payload: dict[str, Any]
) -> None:
    with patch("zipweather.weather.api.requests.get") as mock_get:
        mock_get.return_value = _response(200, sample_payload)
        api.fetch_weather("06447-1234")

    assert mock_get.call_args.kwargs["params"]["zip"] == "06447"


@pytest.mark.parametrize("location_id", ["", "   "])
def test_empty_location_rejected_without_request(api: WeatherAPI, location_id: str) -> None:
    with patch("zipweather.weather.api.requests.get") as mock_get:
        with pytest.raises(InvalidLocationError):
            api.fetch_weather(location_id)
    mock_get.assert_not_called()


@pytest.mark.parametrize(
    "exc", [requests.ConnectionError("refused"), requests.Timeout("slow")]
)
def test_network_failure_is_transport_error(api: WeatherAPI, exc: Exception) -> None:
    with patch("zipweather.weather.api.requests.get", side_effect=exc):
        with pytest.raises(TransportError) as excinfo:
            api.fetch_weather("06447")

    assert excinfo.value.original_error is exc
    assert excinfo.value.code == 0


def test_bad_api_key(api: WeatherAPI) -> None:
    body = {"cod": 401, "message": "Invalid API key"}
    with patch("zipweather.weather.api.requests.get", return_value=_response(401, body)):
        with pytest.raises(AuthenticationError) as excinfo:
            api.fetch_weather("06447")

    assert "Invalid API key" in str(excinfo.value)
    assert excinfo.value.code == 401


def test_unknown_zip(api: WeatherAPI) -> None:
    body = {"cod": "404", "message": "city not found"}
    with patch("zipweather.weather.api.requests.get", return_value=_response(404, body)):
        with pytest.raises(NotFoundError) as excinfo:
            api.fetch_weather("00000")

    assert excinfo.value.message == "city not found"
    assert excinfo.value.response == body


def test_non_json_error_uses_http_map(api: WeatherAPI) -> None:
    with patch(
        "zipweather.weather.api.requests.get", return_value=_response(503, "<html>down</html>")
    ):
        with pytest.raises(ServerError) as excinfo:
            api.fetch_weather("06447")

    assert isinstance(excinfo.value, ProviderError)
    assert excinfo.value.message == "Service unavailable (maintenance)"


def test_malformed_json_is_decode_error(api: WeatherAPI) -> None:
    with patch("zipweather.weather.api.requests.get", return_value=_response(200, "{not json")):
        with pytest.raises(DecodeError):
            api.fetch_weather("06447")


def test_numeric_sys_message_decodes(
    api: WeatherAPI, sample_payload: dict[str, Any]
) -> None:
    sample_payload["sys"]["message"] = 0.0081
    with patch(
        "zipweather.weather.api.requests.get", return_value=_response(200, sample_payload)
    ):
        result = api.fetch_weather("06447")

    assert result.country == "US"
    assert result.sys.sunrise == 1714729212


def test_missing_group_is_decode_error(api: WeatherAPI, sample_payload: dict[str, Any]) -> None:
    sample_payload.pop("main")
    with patch(
        "zipweather.weather.api.requests.get", return_value=_response(200, sample_payload)
    ):
        with pytest.raises(DecodeError) as excinfo:
            api.fetch_weather("06447")

    assert excinfo.value.original_error is not None


@pytest.mark.parametrize(
    "kwargs", [{"api_key": ""}, {"api_key": "fake-api-key-123", "base_url": ""}]
)
def test_missing_configuration_is_fatal(kwargs: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError):
        WeatherAPI(**kwargs)
