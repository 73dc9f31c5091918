from __future__ import annotations

from datetime import datetime
import threading
import time
from unittest.mock import MagicMock

import pytest

from schoolboard.data.scheduler import TickScheduler
from schoolboard.logic.session import SessionState, TickResult

NOW = datetime(2026, 10, 19, 6, 30)


def _session_advancing_cursor() -> MagicMock:
    session = MagicMock()
    session.tick.side_effect = lambda state, now: TickResult(
        state=SessionState(cursor=state.cursor + 1)
    )
    return session


def test_initial_state() -> None:
    scheduler = TickScheduler(MagicMock(), interval_seconds=30, clock=lambda: NOW)

    assert scheduler.state == SessionState()


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        TickScheduler(MagicMock(), interval_seconds=0)


def test_run_ticks_threads_state_through() -> None:
    session = _session_advancing_cursor()
    scheduler = TickScheduler(session, interval_seconds=30, clock=lambda: NOW)

    results = scheduler.run_ticks(3)

    assert len(results) == 3
    assert scheduler.state.cursor == 3
    first_call = session.tick.call_args_list[0]
    assert first_call.args == (SessionState(), NOW)


def test_tick_exception_is_contained() -> None:
    session = MagicMock()
    session.tick.side_effect = [RuntimeError("boom"), TickResult(state=SessionState(cursor=1))]
    scheduler = TickScheduler(session, interval_seconds=30, clock=lambda: NOW)

    assert scheduler.tick_once() is None
    assert scheduler.state == SessionState()
    assert scheduler.tick_once() is not None
    assert scheduler.state.cursor == 1


def test_run_forever_and_stop() -> None:
    session = _session_advancing_cursor()
    scheduler = TickScheduler(session, interval_seconds=0.05, clock=lambda: NOW)

    thread = threading.Thread(target=scheduler.run_forever, daemon=True)
    thread.start()

    deadline = time.time() + 2
    while time.time() < deadline and scheduler.state.cursor < 2:
        time.sleep(0.01)

    assert scheduler.state.cursor >= 2

    scheduler.stop()
    thread.join(timeout=2)

    assert not thread.is_alive()
