"""Current weather models for the OpenWeatherMap response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, ValidationError

from ornithologist.exceptions import MalformedResponse


class Condition(BaseModel):
    """One entry of the provider's ``weather`` list."""

    model_config = ConfigDict(frozen=True)

    description: StrictStr


class MainReadings(BaseModel):
    """The provider's ``main`` block."""

    model_config = ConfigDict(frozen=True)

    temp: StrictFloat
    humidity: StrictFloat
    pressure: StrictFloat


class WindReadings(BaseModel):
    """The provider's ``wind`` block."""

    model_config = ConfigDict(frozen=True)

    speed: StrictFloat


class ProviderResponse(BaseModel):
    """Raw shape of a current weather response. Unknown keys are ignored."""

    model_config = ConfigDict(frozen=True)

    weather: list[Condition] = Field(min_length=1)
    main: MainReadings
    wind: WindReadings
    name: StrictStr


class WeatherPayload(BaseModel):
    """Current weather for one location, flattened for display."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    condition_description: str
    temperature_celsius: float
    humidity_percent: float
    pressure_hpa: float
    wind_speed_mps: float

    @classmethod
    def from_provider(cls, data: Any) -> WeatherPayload:
        """Build a payload from a decoded provider body.

        Only the first condition entry is kept. Raises MalformedResponse when
        the body is missing a required key, has an empty ``weather`` list or
        carries a value of the wrong type.
        """
        try:
            raw = ProviderResponse.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponse(
                f"Failed to validate weather response: {exc}"
            ) from exc
        return cls(
            location_name=raw.name,
            condition_description=raw.weather[0].description,
            temperature_celsius=raw.main.temp,
            humidity_percent=raw.main.humidity,
            pressure_hpa=raw.main.pressure,
            wind_speed_mps=raw.wind.speed,
        )
