"""Countdown to when the rider has to be at the bus stop."""

from __future__ import annotations

from datetime import date, datetime, timedelta
import logging
from typing import Callable

from schoolboard.data.late_bus_client import LateBusRecord

logger = logging.getLogger(__name__)

LateBusLookup = Callable[[date], "LateBusRecord | None"]


def bus_target_time(now: datetime, expected_time: str, buffer_minutes: int) -> datetime:
    """Today's expected bus time, moved earlier by the ready-by buffer."""
    hour, minute = (int(part) for part in expected_time.split(":"))
    bus_time = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    return bus_time - timedelta(minutes=buffer_minutes)


def _lookup_late_record(lookup: LateBusLookup, today: date) -> LateBusRecord | None:
    try:
        return lookup(today)
    except Exception as exc:
        logger.warning("Late bus lookup failed, assuming on time: %s", exc)
        return None


def format_duration(seconds: int) -> str:
    return f"{seconds // 60}m {seconds % 60}s"


def compute_countdown(
    now: datetime,
    expected_time: str,
    buffer_minutes: int,
    late_bus_lookup: LateBusLookup,
    *,
    past_due_message: str = "No bus today",
) -> str:
    """Build the countdown text, adjusted for any delay reported for today.

    Returns ``past_due_message`` once the adjusted target has passed so the
    board never shows a negative duration.
    """
    target = bus_target_time(now, expected_time, buffer_minutes)
    record = _lookup_late_record(late_bus_lookup, now.date())
    if record is not None:
        target += timedelta(minutes=record.late_minutes)

    diff = int((target - now).total_seconds())
    if diff <= 0:
        return past_due_message

    lines = [format_duration(diff)]
    if record is not None:
        lines.append(f"Late {record.late_minutes} min")
        lines.extend(text for text in (record.reason.strip(), record.details.strip()) if text)
    return "\n".join(lines)


__all__ = ["LateBusLookup", "bus_target_time", "compute_countdown", "format_duration"]
