"""Vestaboard character codes and text layout."""

from __future__ import annotations

import textwrap

BoardLayout = list[list[int]]

ROWS = 6
COLUMNS = 22
BLANK = 0

CHARACTER_CODES: dict[str, int] = {" ": BLANK}
CHARACTER_CODES.update({chr(ord("A") + i): 1 + i for i in range(26)})
CHARACTER_CODES.update({str(digit): 26 + digit for digit in range(1, 10)})
CHARACTER_CODES.update(
    {
        "0": 36,
        "!": 37,
        "@": 38,
        "#": 39,
        "$": 40,
        "(": 41,
        ")": 42,
        "-": 44,
        "+": 46,
        "&": 47,
        "=": 48,
        ";": 49,
        ":": 50,
        "'": 52,
        '"': 53,
        "%": 54,
        ",": 55,
        ".": 56,
        "/": 59,
        "?": 60,
        "°": 62,
    }
)
CODE_CHARACTERS: dict[int, str] = {code: char for char, code in CHARACTER_CODES.items()}

# Solid colour tiles.
COLOR_CODES: dict[int, tuple[int, int, int]] = {
    63: (219, 40, 40),
    64: (255, 116, 0),
    65: (255, 190, 0),
    66: (0, 154, 68),
    67: (0, 112, 200),
    68: (148, 72, 168),
    69: (255, 255, 255),
    70: (0, 0, 0),
    71: (255, 255, 255),
}


def text_to_codes(text: str) -> list[int]:
    """Encode one line; characters the board lacks become blanks."""
    return [CHARACTER_CODES.get(char, BLANK) for char in text.upper()]


def codes_to_text(codes: list[int]) -> str:
    return "".join(CODE_CHARACTERS.get(code, " ") for code in codes)


def layout_to_text(layout: BoardLayout) -> str:
    """Readable rendering of a grid, trailing blanks trimmed."""
    return "\n".join(codes_to_text(row).rstrip() for row in layout)


def wrap_lines(text: str, width: int = COLUMNS) -> list[str]:
    lines: list[str] = []
    for line in text.splitlines():
        lines.extend(textwrap.wrap(line, width=width) or [""])
    return lines


def compose_layout(text: str, rows: int = ROWS, columns: int = COLUMNS) -> BoardLayout:
    """Centre multi-line text horizontally and vertically on a blank grid."""
    lines = wrap_lines(text.strip("\n"), columns)[:rows]
    grid = [[BLANK] * columns for _ in range(rows)]
    top = (rows - len(lines)) // 2
    for offset, line in enumerate(lines):
        codes = text_to_codes(line.strip())
        left = (columns - len(codes)) // 2
        grid[top + offset][left : left + len(codes)] = codes
    return grid


__all__ = [
    "BoardLayout",
    "CHARACTER_CODES",
    "COLOR_CODES",
    "COLUMNS",
    "ROWS",
    "codes_to_text",
    "compose_layout",
    "layout_to_text",
    "text_to_codes",
    "wrap_lines",
]
