"""Display output adapters."""

from schoolboard.display.emulator import EmulatorBoard
from schoolboard.display.sink import BoardContent, BoardLayout, BoardSink, DisplayError
from schoolboard.display.vestaboard import VestaboardBoard

__all__ = [
    "BoardContent",
    "BoardLayout",
    "BoardSink",
    "DisplayError",
    "EmulatorBoard",
    "VestaboardBoard",
]
