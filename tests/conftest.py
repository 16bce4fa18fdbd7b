"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

import ornithologist.api_logging as api_logging

BASE_URL = "http://api.openweathermap.org/data/2.5"


SAMPLE_RESPONSE = {
    "coord": {"lon": -97.7431, "lat": 30.2672},
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"},
    ],
    "base": "stations",
    "main": {
        "temp": 22.3,
        "feels_like": 22.1,
        "humidity": 55.0,
        "pressure": 1013.2,
    },
    "visibility": 10000,
    "wind": {"speed": 3.4, "deg": 180},
    "dt": 1715000000,
    "name": "Austin",
    "cod": 200,
}

SAMPLE_RAINY_RESPONSE = {
    "weather": [
        {"description": "light rain"},
        {"description": "mist"},
    ],
    "main": {"temp": -3, "humidity": 93, "pressure": 998},
    "wind": {"speed": 7.25},
    "name": "Bergen",
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h for h in logger.handlers
        if isinstance(h, (logging.FileHandler, logging.NullHandler))
    ]


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path, monkeypatch):
    """Send the API call log to tmp_path instead of the home directory."""
    named_logger = logging.getLogger("ornithologist.api")
    for h in _own_handlers(named_logger):
        named_logger.removeHandler(h)
    monkeypatch.setattr(api_logging, "_logger", None)
    monkeypatch.setattr(api_logging, "_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(api_logging, "_LOG_FILE", str(tmp_path / "logs" / "api_calls.log"))

    yield tmp_path / "logs"

    # Close file handlers to release file locks (important on Windows)
    for h in _own_handlers(named_logger):
        h.close()
        named_logger.removeHandler(h)
