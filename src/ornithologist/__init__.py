"""Ornithologist: birdwatching advice from the season and the current weather."""

from ornithologist.classifiers import (
    ConditionCategory,
    Season,
    TemperatureCategory,
    classify_condition,
    classify_season,
    classify_temperature,
    seasonal_advisory,
)
from ornithologist.client import WeatherClient
from ornithologist.exceptions import (
    InputError,
    MalformedResponse,
    OrnithologistError,
    ProviderAPIError,
    ProviderConnectionError,
    ProviderTimeoutError,
    TransportError,
)
from ornithologist.models.weather import WeatherPayload
from ornithologist.presenter import format_weather

__all__ = [
    "ConditionCategory",
    "InputError",
    "MalformedResponse",
    "OrnithologistError",
    "ProviderAPIError",
    "ProviderConnectionError",
    "ProviderTimeoutError",
    "Season",
    "TemperatureCategory",
    "TransportError",
    "WeatherClient",
    "WeatherPayload",
    "classify_condition",
    "classify_season",
    "classify_temperature",
    "format_weather",
    "seasonal_advisory",
]

__version__ = "0.1.0"
