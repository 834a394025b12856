"""Snake body representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A fixed-capacity snake stored as a deque of (row, col) segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``max_length`` is the
    capacity chosen at creation; the body never grows beyond it.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        max_length: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        if max_length < length:
            raise ValueError("max_length must be at least the initial length.")
        dr, dc = direction.value
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append((start_row - dr * i, start_col - dc * i))
        self.direction = direction
        self.max_length = max_length
        self.alive = True

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        """Return the tail coordinate."""
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def is_reversal(self, new_direction: Direction) -> bool:
        """Check whether *new_direction* would turn the snake back on itself."""
        return new_direction is self.direction.opposite

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dr, dc = self.direction.value
        r, c = self.head
        return r + dr, c + dc

    def advance(self) -> tuple[int, int]:
        """Shift every segment onto its predecessor and move the head.

        Returns the position the tail occupied before the move.
        """
        tail = self.tail
        self.body.appendleft(self.next_head())
        self.body.pop()
        return tail

    def grow(self, tail: tuple[int, int]) -> None:
        """Append a segment at *tail*, usually the cell just vacated."""
        if len(self.body) >= self.max_length:
            raise OverflowError(
                f"Snake is already at its maximum length of {self.max_length}."
            )
        self.body.append(tail)

    def occupies(self, row: int, col: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (row, col) in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
            "length": self.length,
            "max_length": self.max_length,
            "alive": self.alive,
        }
