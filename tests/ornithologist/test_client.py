"""Tests for the weather client."""

from __future__ import annotations

import httpx
import pytest
import respx

from ornithologist import WeatherClient, WeatherPayload
from ornithologist.client import build_query_params
from ornithologist.exceptions import (
    MalformedResponse,
    ProviderAPIError,
    ProviderConnectionError,
)
from tests.conftest import SAMPLE_RESPONSE

BASE_URL = "http://api.openweathermap.org/data/2.5"


class TestBuildQueryParams:
    def test_params(self) -> None:
        assert build_query_params("Austin", "US", "secret") == [
            ("q", "Austin,US"),
            ("units", "metric"),
            ("appid", "secret"),
        ]


class TestWeatherClient:
    @respx.mock
    def test_current_weather(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESPONSE)
        )
        with WeatherClient() as client:
            payload = client.current_weather("Austin", "US", "secret")
        assert isinstance(payload, WeatherPayload)
        assert payload.location_name == "Austin"
        assert route.call_count == 1
        params = route.calls.last.request.url.params
        assert params["q"] == "Austin,US"
        assert params["units"] == "metric"
        assert params["appid"] == "secret"

    @respx.mock
    def test_city_with_spaces(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESPONSE)
        )
        with WeatherClient() as client:
            client.current_weather("San Antonio", "US", "secret")
        assert route.calls.last.request.url.params["q"] == "San Antonio,US"

    @respx.mock
    def test_custom_base_url(self) -> None:
        route = respx.get("https://weather.example.test/v2/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESPONSE)
        )
        with WeatherClient(base_url="https://weather.example.test/v2") as client:
            client.current_weather("Austin", "US", "secret")
        assert route.called

    @respx.mock
    def test_rejected_key(self) -> None:
        respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(401, json={"cod": 401, "message": "Invalid API key."})
        )
        with WeatherClient() as client:
            with pytest.raises(ProviderAPIError) as exc_info:
                client.current_weather("Austin", "US", "wrong")
        assert exc_info.value.status_code == 401

    @respx.mock
    def test_malformed_body(self) -> None:
        body = {key: value for key, value in SAMPLE_RESPONSE.items() if key != "wind"}
        respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=body)
        )
        with WeatherClient() as client:
            with pytest.raises(MalformedResponse):
                client.current_weather("Austin", "US", "secret")

    @respx.mock
    def test_no_retry_on_failure(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            side_effect=httpx.ConnectError("refused")
        )
        with WeatherClient() as client:
            with pytest.raises(ProviderConnectionError):
                client.current_weather("Austin", "US", "secret")
        assert route.call_count == 1

    @respx.mock
    def test_call_is_logged_without_key(self, _isolated_api_log) -> None:
        respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESPONSE)
        )
        with WeatherClient() as client:
            client.current_weather("Austin", "US", "secret")
        content = (_isolated_api_log / "api_calls.log").read_text()
        assert "CALL: WeatherClient.current_weather(city='Austin'" in content
        assert "OK: WeatherClient.current_weather" in content
        assert "secret" not in content
