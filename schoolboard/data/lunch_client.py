"""School lunch menu from an iCalendar feed."""

from __future__ import annotations

from datetime import date, datetime

from icalendar import Calendar
import requests

MAX_LUNCH_ITEMS = 3


class LunchClientError(Exception):
    """Raised when the lunch calendar cannot be fetched or parsed."""


def _event_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def menu_items(description: str, limit: int = MAX_LUNCH_ITEMS) -> list[str]:
    """Non-blank description lines, capped at ``limit``."""
    items = [line.strip() for line in description.splitlines() if line.strip()]
    return items[:limit]


def find_lunch(calendar: Calendar, today: date) -> list[str] | None:
    """Return today's menu items, or None if no event today lists any."""
    for event in calendar.walk("VEVENT"):
        start = event.get("DTSTART")
        if start is None:
            continue
        if _event_date(start.dt) != today:
            continue
        items = menu_items(str(event.get("DESCRIPTION", "")))
        if items:
            return items
    return None


class LunchClient:
    """Fetches the lunch calendar feed and picks out today's menu."""

    def __init__(self, calendar_url: str, timeout_seconds: float = 10) -> None:
        self._calendar_url = calendar_url
        self._timeout_seconds = timeout_seconds

    def get_menu(self, today: date) -> list[str] | None:
        """Fetch the feed and return today's menu items, if any."""
        try:
            response = requests.get(self._calendar_url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise LunchClientError(f"Lunch calendar request failed: {exc}") from exc
        if response.status_code != 200:
            raise LunchClientError(f"Lunch calendar request failed: Status {response.status_code}")

        try:
            calendar = Calendar.from_ical(response.text)
        except ValueError as exc:
            raise LunchClientError(f"Lunch calendar was not valid iCalendar: {exc}") from exc
        return find_lunch(calendar, today)


__all__ = ["LunchClient", "LunchClientError", "MAX_LUNCH_ITEMS", "find_lunch", "menu_items"]
