"""OpenWeatherMap One Call client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

ONECALL_URL = "https://api.openweathermap.org/data/2.5/onecall"


class WeatherClientError(Exception):
    """Raised when a weather request fails or the response is malformed."""


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions plus today's forecast range."""

    temperature: float
    description: str
    high: float
    low: float


class WeatherClient:
    """Thin wrapper around the One Call API using requests."""

    def __init__(
        self,
        latitude: str,
        longitude: str,
        token: str,
        units: str = "imperial",
        timeout_seconds: float = 10,
    ) -> None:
        self._latitude = latitude
        self._longitude = longitude
        self._token = token
        self._units = units
        self._timeout_seconds = timeout_seconds

    @property
    def units(self) -> str:
        return self._units

    def get_report(self) -> WeatherReport:
        """Fetch current temperature, conditions, and today's high/low."""
        params = {
            "lat": self._latitude,
            "lon": self._longitude,
            "appid": self._token,
            "units": self._units,
            "exclude": "minutely,hourly",
        }
        try:
            response = requests.get(ONECALL_URL, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise WeatherClientError(f"Weather request failed: {exc}") from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise WeatherClientError(f"Weather request failed: {detail}")

        try:
            data = response.json()
        except ValueError as exc:
            raise WeatherClientError("Weather response was not valid JSON") from exc
        return parse_report(data)


def parse_report(data: dict[str, Any]) -> WeatherReport:
    """Extract a WeatherReport from a One Call response body."""
    try:
        current = data["current"]
        today = data["daily"][0]
        return WeatherReport(
            temperature=float(current["temp"]),
            description=str(current["weather"][0]["description"]),
            high=float(today["temp"]["max"]),
            low=float(today["temp"]["min"]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise WeatherClientError(f"Weather response missing field: {exc}") from exc


__all__ = ["WeatherClient", "WeatherClientError", "WeatherReport", "parse_report"]
