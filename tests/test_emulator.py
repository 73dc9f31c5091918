from __future__ import annotations

from schoolboard.display import BoardSink, EmulatorBoard
from schoolboard.rendering.layout import layout_to_text


def test_emulator_is_a_board_sink() -> None:
    assert isinstance(EmulatorBoard(frame_path=None), BoardSink)


def test_read_before_write_is_none() -> None:
    assert EmulatorBoard(frame_path=None).read() is None


def test_write_text_lays_out_and_saves_png(tmp_path) -> None:
    frame_path = tmp_path / "out" / "board.png"
    board = EmulatorBoard(frame_path=str(frame_path))

    board.write("Today's Lunch:\nPizza")

    assert frame_path.exists()
    assert "TODAY'S LUNCH:" in layout_to_text(board.read())
    assert "PIZZA" in layout_to_text(board.read())


def test_write_grid_then_read_back_copy() -> None:
    grid = [[1, 2], [3, 4]]
    board = EmulatorBoard(frame_path=None)

    board.write(grid)
    copy = board.read()
    copy[0][0] = 99

    assert board.read() == [[1, 2], [3, 4]]


def test_initial_layout() -> None:
    board = EmulatorBoard(frame_path=None, initial=[[8, 9]])

    assert board.read() == [[8, 9]]
