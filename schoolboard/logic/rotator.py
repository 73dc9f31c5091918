"""Round-robin slide rotation."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence


class SlideKind(str, Enum):
    """The closed set of slides the board can show."""

    DATE = "date"
    WEATHER = "weather"
    LUNCH = "lunch"
    BUS = "bus"


DEFAULT_SEQUENCE: tuple[SlideKind, ...] = (
    SlideKind.DATE,
    SlideKind.WEATHER,
    SlideKind.LUNCH,
    SlideKind.BUS,
)


def parse_slide_sequence(names: Iterable[str]) -> tuple[SlideKind, ...]:
    """Turn configured slide names into a validated, non-empty sequence."""
    if isinstance(names, str):
        raise ValueError("slides must be a list of slide names")
    sequence = []
    for name in names:
        try:
            sequence.append(SlideKind(str(name).strip().lower()))
        except ValueError as exc:
            raise ValueError(f"Unknown slide '{name}'") from exc
    if not sequence:
        raise ValueError("slides must name at least one slide")
    return tuple(sequence)


def next_slide(sequence: Sequence[SlideKind], cursor: int) -> tuple[SlideKind, int]:
    """Return the slide at ``cursor`` and the cursor for the following tick."""
    if not sequence:
        raise ValueError("slide sequence is empty")
    if not 0 <= cursor < len(sequence):
        raise ValueError(f"cursor {cursor} outside sequence of length {len(sequence)}")
    return sequence[cursor], (cursor + 1) % len(sequence)


__all__ = ["SlideKind", "DEFAULT_SEQUENCE", "parse_slide_sequence", "next_slide"]
