"""Configuration loader for the school morning board."""

from __future__ import annotations

from dataclasses import dataclass
import os
import re
from typing import Any

from dotenv import load_dotenv
import yaml

from schoolboard.logic.rotator import DEFAULT_SEQUENCE, SlideKind, parse_slide_sequence
from schoolboard.logic.service_window import ServiceWindow

DEFAULT_POLL_INTERVAL_SECONDS = 30
DEFAULT_PAST_DUE_MESSAGE = "No bus today"

_TRUTHY = {"1", "true", "yes", "on"}
_CLOCK_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass(frozen=True)
class ServiceConfig:
    """Daily service window configuration."""

    window: ServiceWindow
    weekdays_only: bool
    force_service_time: bool


@dataclass(frozen=True)
class BoardConfig:
    """Vestaboard connection and rotation configuration."""

    api_key: str
    poll_interval_seconds: int
    slides: tuple[SlideKind, ...]


@dataclass(frozen=True)
class WeatherConfig:
    """OpenWeatherMap configuration."""

    latitude: str
    longitude: str
    token: str
    units: str


@dataclass(frozen=True)
class LunchConfig:
    """School lunch calendar configuration."""

    calendar_url: str


@dataclass(frozen=True)
class BusConfig:
    """School bus countdown configuration."""

    number: str
    expected_time: str
    buffer_minutes: int
    late_bus_sheet_url: str
    past_due_message: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    service: ServiceConfig
    board: BoardConfig
    weather: WeatherConfig
    lunch: LunchConfig
    bus: BusConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = _require_key(data, name, name)
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' config must be a mapping")
    return section


def _env_or(name: str, fallback: Any) -> Any:
    value = os.environ.get(name, "").strip()
    return value if value else fallback


def _clock_time(value: Any, context: str) -> str:
    text = str(value).strip()
    if not _CLOCK_RE.match(text):
        raise ValueError(f"Invalid time '{text}' in {context} config, expected HH:MM")
    return text


def _positive_int(value: Any, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from exc
    if number <= 0:
        raise ValueError(f"'{key}' must be positive, got {number}")
    return number


def _non_negative_int(value: Any, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from exc
    if number < 0:
        raise ValueError(f"'{key}' must not be negative, got {number}")
    return number


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file plus environment overrides."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    service_section = _require_section(data, "service")
    board_section = _require_section(data, "board")
    weather_section = _require_section(data, "weather")
    lunch_section = _require_section(data, "lunch")
    bus_section = _require_section(data, "bus")
    logging_section = _require_section(data, "logging")

    window = ServiceWindow(
        start=_clock_time(_require_key(service_section, "start", "service"), "service"),
        end=_clock_time(_require_key(service_section, "end", "service"), "service"),
    )
    service = ServiceConfig(
        window=window,
        weekdays_only=_flag(service_section.get("weekdays_only", False)),
        force_service_time=_flag(_env_or("FORCE_SERVICE_TIME", service_section.get("force", False))),
    )

    board = BoardConfig(
        api_key=os.environ.get("VESTABOARD_API_KEY", ""),
        poll_interval_seconds=_positive_int(
            _env_or(
                "POLL_INTERVAL_SECONDS",
                board_section.get("poll_interval_seconds", DEFAULT_POLL_INTERVAL_SECONDS),
            ),
            "poll_interval_seconds",
        ),
        slides=parse_slide_sequence(board_section.get("slides", [kind.value for kind in DEFAULT_SEQUENCE])),
    )

    units = str(weather_section.get("units", "imperial"))
    if units not in ("imperial", "metric"):
        raise ValueError(f"'units' must be 'imperial' or 'metric', got {units!r}")
    weather = WeatherConfig(
        latitude=str(_env_or("WEATHER_LAT", _require_key(weather_section, "latitude", "weather"))),
        longitude=str(_env_or("WEATHER_LON", _require_key(weather_section, "longitude", "weather"))),
        token=os.environ.get("WEATHER_TOKEN", ""),
        units=units,
    )

    lunch = LunchConfig(calendar_url=_require_key(lunch_section, "calendar_url", "lunch"))

    bus = BusConfig(
        number=str(_env_or("BUS_NUMBER", _require_key(bus_section, "number", "bus"))),
        expected_time=_clock_time(_require_key(bus_section, "expected_time", "bus"), "bus"),
        buffer_minutes=_non_negative_int(bus_section.get("buffer_minutes", 0), "buffer_minutes"),
        late_bus_sheet_url=_env_or(
            "LATE_BUS_SHEET_URL", _require_key(bus_section, "late_bus_sheet_url", "bus")
        ),
        past_due_message=str(bus_section.get("past_due_message", DEFAULT_PAST_DUE_MESSAGE)),
    )

    log = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(service=service, board=board, weather=weather, lunch=lunch, bus=bus, log=log)
