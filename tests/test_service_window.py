from __future__ import annotations

from datetime import datetime

import pytest

from schoolboard.logic.service_window import ServiceWindow, is_service_time

WINDOW = ServiceWindow(start="06:00", end="07:15")


@pytest.mark.parametrize(
    ("clock", "expected"),
    [
        ("05:59", False),
        ("06:00", True),
        ("06:30", True),
        ("07:15", True),
        ("07:16", False),
        ("23:59", False),
        ("00:00", False),
    ],
)
def test_window_bounds_are_inclusive(clock: str, expected: bool) -> None:
    hour, minute = (int(part) for part in clock.split(":"))
    now = datetime(2026, 10, 19, hour, minute, 59)

    assert is_service_time(now, WINDOW) is expected


def test_force_overrides_time() -> None:
    now = datetime(2026, 10, 19, 22, 0)

    assert is_service_time(now, WINDOW) is False
    assert is_service_time(now, WINDOW, force=True) is True


def test_force_overrides_weekend() -> None:
    saturday = datetime(2026, 10, 24, 22, 0)

    assert is_service_time(saturday, WINDOW, force=True, weekdays_only=True) is True


def test_weekends_count_by_default() -> None:
    saturday = datetime(2026, 10, 24, 6, 30)

    assert is_service_time(saturday, WINDOW) is True


def test_weekdays_only_skips_weekend() -> None:
    saturday = datetime(2026, 10, 24, 6, 30)
    sunday = datetime(2026, 10, 25, 6, 30)
    friday = datetime(2026, 10, 23, 6, 30)

    assert is_service_time(saturday, WINDOW, weekdays_only=True) is False
    assert is_service_time(sunday, WINDOW, weekdays_only=True) is False
    assert is_service_time(friday, WINDOW, weekdays_only=True) is True


def test_matches_lexicographic_comparison_for_every_minute() -> None:
    window = ServiceWindow(start="09:05", end="13:40")
    for minute_of_day in range(24 * 60):
        now = datetime(2026, 10, 19, minute_of_day // 60, minute_of_day % 60)
        clock = f"{now.hour:02d}:{now.minute:02d}"
        assert is_service_time(now, window) is (window.start <= clock <= window.end)


def test_single_minute_window() -> None:
    window = ServiceWindow(start="06:00", end="06:00")

    assert is_service_time(datetime(2026, 10, 19, 6, 0, 30), window) is True
    assert is_service_time(datetime(2026, 10, 19, 6, 1), window) is False


def test_inverted_window_rejected() -> None:
    with pytest.raises(ValueError):
        ServiceWindow(start="22:00", end="06:00")
