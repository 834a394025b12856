"""Exceptions raised by the snake game."""

from __future__ import annotations


class SnakeError(Exception):
    """Base class for fatal game errors."""


class PitTooSmallError(SnakeError, ValueError):
    """The requested pit is smaller than the minimum playable size."""


class TerminalTooSmallError(SnakeError):
    """The terminal cannot fit the pit plus its border and status line."""

    def __init__(self, required_rows: int, required_cols: int) -> None:
        self.required_rows = required_rows
        self.required_cols = required_cols
        super().__init__(
            f"Terminal too small! Need at least {required_rows}x{required_cols} "
            "(including borders)"
        )
