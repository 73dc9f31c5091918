"""Display sink contract shared by the Vestaboard and emulator outputs."""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from schoolboard.rendering.layout import BoardLayout

BoardContent = Union[str, BoardLayout]


class DisplayError(Exception):
    """Raised when the board cannot be read or written."""


@runtime_checkable
class BoardSink(Protocol):
    """Something that can report and replace what the board shows."""

    def read(self) -> BoardLayout | None:
        """Return the current board grid, or None when it is unknown."""

    def write(self, content: BoardContent) -> None:
        """Show formatted text or a pre-encoded grid."""


def is_layout(content: object) -> bool:
    """True for a grid of character codes rather than formatted text."""
    return isinstance(content, list) and all(isinstance(row, list) for row in content)


__all__ = ["BoardContent", "BoardLayout", "BoardSink", "DisplayError", "is_layout"]
