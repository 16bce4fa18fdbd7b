"""Client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

from ornithologist._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport
from ornithologist.api_logging import log_api_call
from ornithologist.models.weather import WeatherPayload


def build_query_params(city: str, country_code: str, api_key: str) -> list[tuple[str, str]]:
    """Build the query parameters for a current weather lookup."""
    return [
        ("q", f"{city},{country_code}"),
        ("units", "metric"),
        ("appid", api_key),
    ]


class WeatherClient:
    """Synchronous client for current weather lookups.

    Usage:
        with WeatherClient() as client:
            payload = client.current_weather("Austin", "US", api_key)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def current_weather(self, city: str, country_code: str, api_key: str) -> WeatherPayload:
        """Fetch the current metric weather for a city.

        Issues exactly one request. Raises TransportError subclasses when the
        request fails and MalformedResponse when the body cannot be parsed.
        """
        params = build_query_params(city, country_code, api_key)
        data = self._transport.get("/weather", params)
        return WeatherPayload.from_provider(data)
