"""Slide content producers.

Each producer turns one external data source into the multi-line text shown
on the board. Fetch failures are reported as a fixed message for that slide
so a bad source never stops the board from updating.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import Callable, Mapping

from schoolboard.data.late_bus_client import LateBusClient
from schoolboard.data.lunch_client import LunchClient, LunchClientError
from schoolboard.data.weather_client import WeatherClient, WeatherClientError
from schoolboard.logic.countdown import compute_countdown
from schoolboard.logic.rotator import SlideKind

logger = logging.getLogger(__name__)

WEATHER_ERROR = "Error fetching weather data"
LUNCH_ERROR = "Error fetching lunch data"
LUNCH_MISSING = "No lunch data available for today"
SLIDE_ERROR = "Error fetching {kind} data"

SlideProducer = Callable[[datetime], str]

_UNIT_SYMBOLS = {"imperial": "F", "metric": "C"}


def _degrees(value: float) -> int:
    # Halves round away from zero.
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def date_slide(now: datetime) -> str:
    return f"Good morning.\nToday is {now:%A, %B} {now.day}\nand the time is {now:%H:%M}."


class WeatherSlide:
    """Current temperature, conditions, and today's range."""

    def __init__(self, client: WeatherClient) -> None:
        self._client = client

    def __call__(self, now: datetime) -> str:
        try:
            report = self._client.get_report()
        except WeatherClientError as exc:
            logger.warning("Weather unavailable: %s", exc)
            return WEATHER_ERROR
        unit = _UNIT_SYMBOLS.get(self._client.units, "F")
        return (
            "Today's Weather\n"
            f"{_degrees(report.temperature)}°{unit}, {report.description}\n"
            f"High: {_degrees(report.high)}°{unit}, Low: {_degrees(report.low)}°{unit}"
        )


class LunchSlide:
    """Up to three items from today's lunch menu."""

    def __init__(self, client: LunchClient) -> None:
        self._client = client

    def __call__(self, now: datetime) -> str:
        try:
            items = self._client.get_menu(now.date())
        except LunchClientError as exc:
            logger.warning("Lunch menu unavailable: %s", exc)
            return LUNCH_ERROR
        if items is None:
            return LUNCH_MISSING
        return "\n".join(["Today's Lunch:", *items])


class BusSlide:
    """Countdown to when the rider needs to be ready for the bus."""

    def __init__(
        self,
        late_bus: LateBusClient,
        bus_number: str,
        expected_time: str,
        buffer_minutes: int,
        past_due_message: str,
    ) -> None:
        self._late_bus = late_bus
        self._bus_number = bus_number
        self._expected_time = expected_time
        self._buffer_minutes = buffer_minutes
        self._past_due_message = past_due_message

    def __call__(self, now: datetime) -> str:
        countdown = compute_countdown(
            now,
            self._expected_time,
            self._buffer_minutes,
            self._late_bus.lookup,
            past_due_message=self._past_due_message,
        )
        return f"Bus {self._bus_number}\n{countdown}"


class SlideDeck:
    """Maps every slide kind to the producer that renders it."""

    def __init__(self, producers: Mapping[SlideKind, SlideProducer]) -> None:
        missing = [kind.value for kind in SlideKind if kind not in producers]
        if missing:
            raise ValueError(f"No producer for slides: {', '.join(missing)}")
        self._producers = dict(producers)

    def render(self, kind: SlideKind, now: datetime) -> str:
        """Produce the text for ``kind``, falling back to a fixed message on any failure."""
        try:
            return self._producers[kind](now)
        except Exception:
            logger.exception("Slide %s failed", kind.value)
            return SLIDE_ERROR.format(kind=kind.value)


def build_deck(config) -> SlideDeck:
    """Wire the slide producers from application config."""
    weather = WeatherClient(
        config.weather.latitude,
        config.weather.longitude,
        config.weather.token,
        units=config.weather.units,
    )
    late_bus = LateBusClient(config.bus.late_bus_sheet_url, config.bus.number)
    return SlideDeck(
        {
            SlideKind.DATE: date_slide,
            SlideKind.WEATHER: WeatherSlide(weather),
            SlideKind.LUNCH: LunchSlide(LunchClient(config.lunch.calendar_url)),
            SlideKind.BUS: BusSlide(
                late_bus,
                config.bus.number,
                config.bus.expected_time,
                config.bus.buffer_minutes,
                config.bus.past_due_message,
            ),
        }
    )


__all__ = [
    "BusSlide",
    "LUNCH_ERROR",
    "LUNCH_MISSING",
    "LunchSlide",
    "SlideDeck",
    "SlideProducer",
    "WEATHER_ERROR",
    "WeatherSlide",
    "build_deck",
    "date_slide",
]
