"""Client for the district's published late-bus table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
import logging

from bs4 import BeautifulSoup
import requests

logger = logging.getLogger(__name__)

DATE_COLUMN = 0
BUS_NUMBER_COLUMN = 1
LATE_MINUTES_COLUMN = 4
REASON_COLUMN = 5
DETAILS_COLUMN = 6

_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y")


class LateBusError(Exception):
    """Raised when the late-bus table cannot be fetched."""


@dataclass(frozen=True)
class LateBusRecord:
    """Reported delay for one bus on one day."""

    late_minutes: int
    reason: str
    details: str


def _parse_date(text: str) -> date | None:
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_table_rows(html: str) -> list[list[str]]:
    """Return the text of every ``<td>`` cell, one list per ``<tr>``."""
    soup = BeautifulSoup(html, "html.parser")
    rows = []
    for tr in soup.find_all("tr"):
        cells = [td.get_text(strip=True) for td in tr.find_all("td")]
        if cells:
            rows.append(cells)
    return rows


def find_late_bus(rows: list[list[str]], bus_number: str, today: date) -> LateBusRecord | None:
    """Pick the first row reported for today whose bus field mentions ``bus_number``."""
    needle = bus_number.strip().lower()
    if not needle:
        return None
    for cells in rows:
        if len(cells) <= LATE_MINUTES_COLUMN:
            continue
        if _parse_date(cells[DATE_COLUMN]) != today:
            continue
        if needle not in cells[BUS_NUMBER_COLUMN].lower():
            continue
        try:
            late_minutes = int(cells[LATE_MINUTES_COLUMN])
        except ValueError:
            logger.debug("Skipping late bus row with bad delay: %r", cells)
            continue
        return LateBusRecord(
            late_minutes=late_minutes,
            reason=cells[REASON_COLUMN] if len(cells) > REASON_COLUMN else "",
            details=cells[DETAILS_COLUMN] if len(cells) > DETAILS_COLUMN else "",
        )
    return None


class LateBusClient:
    """Fetches the late-bus sheet and looks up today's delay for one bus."""

    def __init__(self, sheet_url: str, bus_number: str, timeout_seconds: float = 10) -> None:
        self._sheet_url = sheet_url
        self._bus_number = bus_number
        self._timeout_seconds = timeout_seconds

    def lookup(self, today: date) -> LateBusRecord | None:
        """Return today's delay for the configured bus, or None when it runs on time."""
        if not self._sheet_url:
            return None
        try:
            response = requests.get(self._sheet_url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise LateBusError(f"Late bus request failed: {exc}") from exc
        if response.status_code != 200:
            raise LateBusError(f"Late bus request failed: Status {response.status_code}")

        record = find_late_bus(parse_table_rows(response.text), self._bus_number, today)
        if record is not None:
            logger.info("Bus %s reported %d min late", self._bus_number, record.late_minutes)
        return record


__all__ = [
    "LateBusClient",
    "LateBusError",
    "LateBusRecord",
    "find_late_bus",
    "parse_table_rows",
]
