"""Weather provider data models."""

from ornithologist.models.weather import (
    Condition,
    MainReadings,
    ProviderResponse,
    WeatherPayload,
    WindReadings,
)

__all__ = [
    "Condition",
    "MainReadings",
    "ProviderResponse",
    "WeatherPayload",
    "WindReadings",
]
