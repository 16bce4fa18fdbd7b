"""Interactive command line for the personal ornithologist."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Protocol

import typer
from rich.console import Console
from rich.text import Text

from ornithologist.classifiers import seasonal_advisory
from ornithologist.client import WeatherClient
from ornithologist.exceptions import InputError, MalformedResponse, TransportError
from ornithologist.models.weather import WeatherPayload
from ornithologist.presenter import (
    BANNER_STYLE,
    FAREWELL_STYLE,
    PROMPT_STYLE,
    format_weather,
)

WELCOME = (
    "Welcome to your personal ornithologist! You will get advice tailored to "
    "your current weather and time of year to spot the most birds on your "
    "next expedition."
)
CITY_PROMPT = "Please enter the name of the city you are currently in:"
COUNTRY_PROMPT = (
    "Please enter the country code you are currently in "
    "(e.g., US for United States):"
)
API_KEY_PROMPT = (
    "Please enter your OpenWeatherMap API key. If you do not have one, fear "
    "not! You can still get advice tailored to your current season. Just type "
    '"no" in the field below.'
)
CONTINUE_PROMPT = "Would you like to check another city? (yes/no)"
FAREWELL = (
    "Thank you for consulting with me! May the force be with you on your "
    "upcoming birdwatching expedition!!"
)

# Exact, case-sensitive answer that turns weather lookups off.
SKIP_LOOKUP = "no"

Clock = Callable[[], datetime]


class WeatherSource(Protocol):
    def current_weather(self, city: str, country_code: str, api_key: str) -> WeatherPayload: ...


def local_now() -> datetime:
    """Current local wall-clock time, with its UTC offset."""
    return datetime.now().astimezone()


class Consultation:
    """One run of the prompt, advise, look up and display flow.

    All collaborators are injected so the flow can run against scripted
    input, a fixed clock and a fake weather source.
    """

    def __init__(
        self,
        weather: WeatherSource,
        console: Console,
        error_console: Console,
        clock: Clock = local_now,
        continuous: bool = False,
    ) -> None:
        self._weather = weather
        self._console = console
        self._error_console = error_console
        self._clock = clock
        self._continuous = continuous

    def prompt_line(self, message: str) -> str:
        """Show a prompt and read one stripped line of input."""
        self._console.print(Text(message, style=PROMPT_STYLE))
        try:
            return self._console.input().strip()
        except (EOFError, OSError) as exc:
            raise InputError(f"Failed to read input: {exc!r}") from exc

    def run(self) -> int:
        """Run the consultation and return the number of lookups attempted."""
        now = self._clock()
        self._console.print(Text(WELCOME, style=BANNER_STYLE))

        attempts = 0
        api_key: str | None = None
        while True:
            city = self.prompt_line(CITY_PROMPT)
            country_code = self.prompt_line(COUNTRY_PROMPT)
            if api_key is None:
                api_key = self.prompt_line(API_KEY_PROMPT)
                self._console.print(Text(seasonal_advisory(now.month)))

            if api_key != SKIP_LOOKUP:
                attempts += 1
                self.lookup(city, country_code, api_key)

            if not self._continuous:
                break
            if self.prompt_line(CONTINUE_PROMPT).lower() != "yes":
                break

        self._console.print(Text(FAREWELL, style=FAREWELL_STYLE))
        return attempts

    def lookup(self, city: str, country_code: str, api_key: str) -> None:
        """Fetch and print the weather; failures are reported, not raised."""
        try:
            payload = self._weather.current_weather(city, country_code, api_key)
        except (TransportError, MalformedResponse) as exc:
            self._error_console.print(Text(f"Error: {exc}"))
            return
        self._console.print(format_weather(payload))


app = typer.Typer(add_completion=False)


@app.command()
def main(
    continuous: bool = typer.Option(
        False,
        "--continuous/--once",
        help="Keep asking for another city until told to stop.",
    ),
) -> None:
    """Get birdwatching advice for your season and current weather."""
    console = Console()
    error_console = Console(stderr=True)
    with WeatherClient() as client:
        consultation = Consultation(
            weather=client,
            console=console,
            error_console=error_console,
            continuous=continuous,
        )
        try:
            consultation.run()
        except InputError as exc:
            error_console.print(Text(str(exc)))
            raise typer.Exit(code=1) from exc
