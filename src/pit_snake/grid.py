"""Pit representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np

from pit_snake.errors import PitTooSmallError

MIN_PIT_SIZE = 20


class CellType(enum.IntEnum):
    """Integer codes stored in the pit array."""

    EMPTY = 0
    BORDER = 1
    HEAD = 2
    BODY = 3
    FOOD = 4


class Pit:
    """NumPy-backed playing field surrounded by a one-cell border.

    Coordinates are (row, col) and include the border: row 0 and row
    ``height + 1`` are border rows, col 0 and col ``width + 1`` are border
    columns. Only the interior ``1..height`` x ``1..width`` is playable.
    """

    def __init__(self, height: int = 20, width: int = 40) -> None:
        if height < MIN_PIT_SIZE or width < MIN_PIT_SIZE:
            raise PitTooSmallError(
                f"Pit dimensions must be at least {MIN_PIT_SIZE}x{MIN_PIT_SIZE}, "
                f"got {height}x{width}."
            )
        self.height = height
        self.width = width
        self.cells = np.zeros((height + 2, width + 2), dtype=np.int8)
        self.clear()

    @property
    def half_perimeter(self) -> int:
        return self.height + self.width

    @property
    def center(self) -> tuple[int, int]:
        """Return the interior cell nearest the middle of the pit."""
        return self.height // 2 + 1, self.width // 2 + 1

    def clear(self) -> None:
        """Reset the interior to empty and redraw the border."""
        self.cells[:] = CellType.BORDER
        self.cells[1:-1, 1:-1] = CellType.EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies in the playable interior."""
        return 0 < row <= self.height and 0 < col <= self.width

    def random_cell(self, rng: np.random.Generator) -> tuple[int, int]:
        """Draw a uniformly random interior coordinate."""
        row = int(rng.integers(1, self.height + 1))
        col = int(rng.integers(1, self.width + 1))
        return row, col

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[row, col] = cell_type

    def to_dict(self) -> dict:
        """Serialize pit state to a dictionary."""
        return {
            "height": self.height,
            "width": self.width,
            "cells": self.cells.tolist(),
        }
