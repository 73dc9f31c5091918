"""Fixed-interval driver for the board session."""

from __future__ import annotations

from datetime import datetime
import logging
import threading
from typing import Callable

from schoolboard.logic.session import BoardSession, SessionState, TickResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TickScheduler:
    """Runs one session tick per interval, never overlapping ticks."""

    def __init__(
        self,
        session: BoardSession,
        interval_seconds: float,
        clock: Clock = datetime.now,
        state: SessionState | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self._session = session
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._state = state if state is not None else SessionState()
        self._stop_event = threading.Event()

    @property
    def state(self) -> SessionState:
        return self._state

    def tick_once(self) -> TickResult | None:
        """Run a single tick; an exception is logged and leaves the state unchanged."""
        try:
            result = self._session.tick(self._state, self._clock())
        except Exception:
            logger.exception("Board tick failed")
            return None
        self._state = result.state
        return result

    def run_ticks(self, count: int) -> list[TickResult | None]:
        """Drive ``count`` ticks back to back without sleeping."""
        return [self.tick_once() for _ in range(count)]

    def run_forever(self) -> None:
        """Tick, then wait out the interval, until stop() is called."""
        self._stop_event.clear()
        logger.info("Board loop started, ticking every %ss", self._interval_seconds)
        while not self._stop_event.is_set():
            self.tick_once()
            self._stop_event.wait(timeout=self._interval_seconds)
        logger.info("Board loop stopped")

    def stop(self) -> None:
        """Signal run_forever() to return after the current tick."""
        self._stop_event.set()


__all__ = ["Clock", "TickScheduler"]
