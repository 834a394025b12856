"""Drawing of game frames and menu screens onto a text surface."""

from __future__ import annotations

import enum
from typing import Protocol

import numpy as np

from pit_snake.engine import Frame, RunState
from pit_snake.grid import CellType
from pit_snake.snake import Direction


class Glyph(enum.Enum):
    """Semantic cell contents; the surface decides how each one looks."""

    BORDER = "border"
    BODY = "body"
    FOOD = "food"
    HEAD_UP = "head_up"
    HEAD_DOWN = "head_down"
    HEAD_LEFT = "head_left"
    HEAD_RIGHT = "head_right"


_HEAD_GLYPHS: dict[Direction, Glyph] = {
    Direction.UP: Glyph.HEAD_UP,
    Direction.DOWN: Glyph.HEAD_DOWN,
    Direction.LEFT: Glyph.HEAD_LEFT,
    Direction.RIGHT: Glyph.HEAD_RIGHT,
}

_CELL_GLYPHS: dict[CellType, Glyph] = {
    CellType.BORDER: Glyph.BORDER,
    CellType.BODY: Glyph.BODY,
    CellType.FOOD: Glyph.FOOD,
}


class Surface(Protocol):
    """Anything that can show a frame.

    ``draw_cell`` takes pit coordinates (border included); ``draw_text``
    takes screen coordinates.
    """

    @property
    def screen_size(self) -> tuple[int, int]: ...

    @property
    def pit_origin(self) -> tuple[int, int]: ...

    def clear(self) -> None: ...

    def draw_cell(self, row: int, col: int, glyph: Glyph) -> None: ...

    def draw_text(self, row: int, col: int, text: str) -> None: ...

    def present(self) -> None: ...


def head_glyph(direction: Direction) -> Glyph:
    return _HEAD_GLYPHS[direction]


def status_line(frame: Frame) -> str:
    return f"Length: {frame.length}/{frame.max_length}"


def _draw_centered(surface: Surface, row_offset: int, lines: list[str]) -> None:
    rows, cols = surface.screen_size
    top = rows // 2 + row_offset
    for i, line in enumerate(lines):
        surface.draw_text(top + i, max(0, (cols - len(line)) // 2), line)


def _draw_cells(surface: Surface, frame: Frame) -> None:
    for row, col in np.argwhere(frame.cells != CellType.EMPTY).tolist():
        cell = CellType(frame.cells[row, col])
        if cell is CellType.HEAD:
            surface.draw_cell(row, col, head_glyph(frame.direction))
        else:
            surface.draw_cell(row, col, _CELL_GLYPHS[cell])


def render_frame(surface: Surface, frame: Frame) -> None:
    """Draw the pit, snake, food and the length counter."""
    surface.clear()
    _draw_cells(surface, frame)
    origin_row, origin_col = surface.pit_origin
    surface.draw_text(max(0, origin_row - 1), origin_col, status_line(frame))
    surface.present()


def render_start_screen(surface: Surface, max_length: int) -> None:
    surface.clear()
    _draw_centered(surface, -3, [
        "================",
        "   SNAKE GAME   ",
        "================",
        "",
        "Use Arrow Keys to Move",
        "Eat food to grow",
        f"To Win: Reach a length of {max_length}",
        "",
        "Press SPACE to start",
        "Press 'q' to quit",
    ])
    surface.present()


def render_end_screen(surface: Surface, frame: Frame) -> None:
    """Draw the final frame with the result message on top."""
    surface.clear()
    _draw_cells(surface, frame)
    if frame.run_state is RunState.VICTORY:
        lines = ["YOU WIN!", status_line(frame)]
    else:
        lines = ["GAME OVER!", f"Final Length: {frame.length}"]
    lines.append("Press 'q' to quit")
    _draw_centered(surface, -1, lines)
    surface.present()
