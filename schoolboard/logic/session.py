"""Board session control: snapshot, rotate, restore."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
import logging
from typing import Sequence

from schoolboard.data.slides import SlideDeck
from schoolboard.display.sink import BoardContent, BoardLayout, BoardSink, DisplayError
from schoolboard.logic.rotator import SlideKind, next_slide
from schoolboard.logic.service_window import ServiceWindow, is_service_time

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Where the session stands relative to the service window.

    ``INSIDE_WINDOW_NO_SNAPSHOT`` only exists within a single tick, between
    entering the window and reading the board, so ``SessionState.phase``
    never reports it.
    """

    OUTSIDE_WINDOW = "outside_window"
    INSIDE_WINDOW_NO_SNAPSHOT = "inside_window_no_snapshot"
    INSIDE_WINDOW_ACTIVE = "inside_window_active"


@dataclass(frozen=True)
class SessionState:
    """What the controller carries between ticks.

    ``snapshot_held`` marks that the pre-window read has happened for the
    current window, even when it produced no content to restore later.
    """

    snapshot: BoardLayout | None = None
    snapshot_held: bool = False
    cursor: int = 0

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase.INSIDE_WINDOW_ACTIVE if self.snapshot_held else SessionPhase.OUTSIDE_WINDOW


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single tick, mostly for logging and tests."""

    state: SessionState
    slide: SlideKind | None = None
    restored: bool = False


class BoardSession:
    """Drives the board through one service window after another."""

    def __init__(
        self,
        sink: BoardSink,
        deck: SlideDeck,
        window: ServiceWindow,
        slides: Sequence[SlideKind],
        *,
        force_service_time: bool = False,
        weekdays_only: bool = False,
    ) -> None:
        if not slides:
            raise ValueError("slide sequence is empty")
        self._sink = sink
        self._deck = deck
        self._window = window
        self._slides = tuple(slides)
        self._force = force_service_time
        self._weekdays_only = weekdays_only

    def in_service(self, now: datetime) -> bool:
        return is_service_time(
            now, self._window, force=self._force, weekdays_only=self._weekdays_only
        )

    def tick(self, state: SessionState, now: datetime) -> TickResult:
        """Advance the session by one tick and return the new state."""
        if self.in_service(now):
            if not state.snapshot_held:
                state = self._take_snapshot(state)
            return self._show_next_slide(state, now)

        if state.snapshot_held:
            self._restore(state.snapshot)
            return TickResult(
                state=replace(state, snapshot=None, snapshot_held=False),
                restored=state.snapshot is not None,
            )

        return TickResult(state=state)

    def _take_snapshot(self, state: SessionState) -> SessionState:
        logger.info("Service window opened, saving current board")
        try:
            snapshot = self._sink.read()
        except DisplayError as exc:
            logger.warning("Could not read board before service window: %s", exc)
            snapshot = None
        return replace(state, snapshot=snapshot, snapshot_held=True)

    def _show_next_slide(self, state: SessionState, now: datetime) -> TickResult:
        kind, cursor = next_slide(self._slides, state.cursor)
        message = self._deck.render(kind, now)
        self._send(message)
        logger.info("Showed %s slide", kind.value)
        return TickResult(state=replace(state, cursor=cursor), slide=kind)

    def _restore(self, snapshot: BoardLayout | None) -> None:
        if snapshot is None:
            logger.info("Service window closed, no saved board to restore")
            return
        logger.info("Service window closed, restoring saved board")
        self._send(snapshot)

    def _send(self, content: BoardContent) -> None:
        try:
            self._sink.write(content)
        except DisplayError as exc:
            logger.warning("Board write failed: %s", exc)


__all__ = ["BoardSession", "SessionPhase", "SessionState", "TickResult"]
