"""Rendering of weather payloads as styled console text."""

from __future__ import annotations

from rich.text import Text

from ornithologist.classifiers import (
    ConditionCategory,
    TemperatureCategory,
    classify_condition,
    classify_temperature,
)
from ornithologist.models.weather import WeatherPayload

TEMPERATURE_GLYPHS: dict[TemperatureCategory, str] = {
    TemperatureCategory.FREEZING: "❄️",
    TemperatureCategory.COLD: "☁️",
    TemperatureCategory.MILD: "⛅",
    TemperatureCategory.WARM: "🌤️",
    TemperatureCategory.HOT: "🔥",
}

# Empty string leaves the console's default style in place.
CONDITION_STYLES: dict[ConditionCategory, str] = {
    ConditionCategory.CLEAR: "bright_yellow",
    ConditionCategory.CLOUDY: "bright_blue",
    ConditionCategory.OBSCURED: "dim",
    ConditionCategory.PRECIPITATING: "bright_cyan",
    ConditionCategory.UNKNOWN: "",
}

BANNER_STYLE = "bright_yellow"
PROMPT_STYLE = "bright_green"
FAREWELL_STYLE = "bright_blue"


def format_weather(
    payload: WeatherPayload,
    temperature: TemperatureCategory | None = None,
    condition: ConditionCategory | None = None,
) -> Text:
    """Build the weather summary block for one payload.

    The categories are derived from the payload unless given. The whole block
    carries the style of its condition category.
    """
    if temperature is None:
        temperature = classify_temperature(payload.temperature_celsius)
    if condition is None:
        condition = classify_condition(payload.condition_description)

    lines = [
        f"Weather in {payload.location_name}: "
        f"{payload.condition_description} {TEMPERATURE_GLYPHS[temperature]}",
        f"> Temperature: {payload.temperature_celsius:.1f}°C,",
        f"> Humidity: {payload.humidity_percent:.1f}%,",
        f"> Pressure: {payload.pressure_hpa:.1f} hPa,",
        f"> Wind Speed: {payload.wind_speed_mps:.1f} m/s",
    ]
    return Text("\n".join(lines), style=CONDITION_STYLES[condition])
