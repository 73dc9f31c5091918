"""Frame composer for previewing the split-flap board."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from schoolboard.rendering.layout import BoardLayout, CODE_CHARACTERS, COLOR_CODES

TILE_WIDTH = 24
TILE_HEIGHT = 36
TILE_GAP = 4
BORDER = 16

COLOR_BACKGROUND = (18, 18, 18)
COLOR_TILE = (34, 34, 34)
COLOR_TEXT = (240, 240, 240)
COLOR_HINGE = (10, 10, 10)

FONT_TILE = ImageFont.load_default()


def frame_size(rows: int, columns: int) -> tuple[int, int]:
    width = BORDER * 2 + columns * TILE_WIDTH + (columns - 1) * TILE_GAP
    height = BORDER * 2 + rows * TILE_HEIGHT + (rows - 1) * TILE_GAP
    return width, height


def _draw_tile(draw: ImageDraw.ImageDraw, left: int, top: int, code: int) -> None:
    right = left + TILE_WIDTH - 1
    bottom = top + TILE_HEIGHT - 1
    fill = COLOR_CODES.get(code, COLOR_TILE)
    draw.rectangle((left, top, right, bottom), fill=fill)

    char = CODE_CHARACTERS.get(code, "")
    if char.strip():
        bbox = draw.textbbox((0, 0), char, font=FONT_TILE)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        text_x = left + (TILE_WIDTH - text_width) // 2 - bbox[0]
        text_y = top + (TILE_HEIGHT - text_height) // 2 - bbox[1]
        draw.text((text_x, text_y), char, font=FONT_TILE, fill=COLOR_TEXT)

    hinge_y = top + TILE_HEIGHT // 2
    draw.line((left, hinge_y, right, hinge_y), fill=COLOR_HINGE, width=1)


def compose_frame(layout: BoardLayout) -> Image.Image:
    """Draw a grid of character codes as split-flap tiles."""
    if not layout or not layout[0]:
        raise ValueError("Layout must have at least one row and one column.")
    columns = len(layout[0])
    if any(len(row) != columns for row in layout):
        raise ValueError("Layout rows must all be the same length.")

    image = Image.new("RGB", frame_size(len(layout), columns), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(image)
    for row_index, row in enumerate(layout):
        top = BORDER + row_index * (TILE_HEIGHT + TILE_GAP)
        for col_index, code in enumerate(row):
            left = BORDER + col_index * (TILE_WIDTH + TILE_GAP)
            _draw_tile(draw, left, top, code)
    return image


__all__ = ["compose_frame", "frame_size"]
