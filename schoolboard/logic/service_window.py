"""Daily service window evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SATURDAY = 5


@dataclass(frozen=True)
class ServiceWindow:
    """Inclusive same-day window expressed as zero-padded ``HH:MM`` strings."""

    start: str
    end: str

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Service window start {self.start} is after end {self.end}; "
                "overnight windows are not supported."
            )


def is_service_time(
    now: datetime,
    window: ServiceWindow,
    *,
    force: bool = False,
    weekdays_only: bool = False,
) -> bool:
    """Return True when ``now`` falls inside the service window."""
    if force:
        return True
    if weekdays_only and now.weekday() >= SATURDAY:
        return False
    current = now.strftime("%H:%M")
    return window.start <= current <= window.end


__all__ = ["ServiceWindow", "is_service_time"]
