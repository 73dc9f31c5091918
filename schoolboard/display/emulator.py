"""Offline board that previews every write as a PNG."""

from __future__ import annotations

import copy
import logging
from pathlib import Path

from PIL import Image

from schoolboard.display.sink import BoardContent, BoardLayout, is_layout
from schoolboard.rendering.composer import compose_frame
from schoolboard.rendering.layout import compose_layout, layout_to_text

logger = logging.getLogger(__name__)

DEFAULT_FRAME_PATH = "emulator_output/board.png"


def save_frame(image: Image.Image, path: str = DEFAULT_FRAME_PATH) -> Path:
    """Save a frame to disk as a PNG image, creating parent folders."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, format="PNG")
    return output_path


class EmulatorBoard:
    """Display sink that lays text out locally and keeps the last grid in memory."""

    def __init__(self, frame_path: str | None = DEFAULT_FRAME_PATH, initial: BoardLayout | None = None) -> None:
        self._frame_path = frame_path
        self._layout = copy.deepcopy(initial) if initial is not None else None

    @property
    def layout(self) -> BoardLayout | None:
        return self._layout

    def read(self) -> BoardLayout | None:
        return copy.deepcopy(self._layout) if self._layout is not None else None

    def write(self, content: BoardContent) -> None:
        layout = copy.deepcopy(content) if is_layout(content) else compose_layout(content)
        self._layout = layout
        logger.debug("Emulator board:\n%s", layout_to_text(layout))
        if self._frame_path:
            save_frame(compose_frame(layout), self._frame_path)


__all__ = ["DEFAULT_FRAME_PATH", "EmulatorBoard", "save_frame"]
