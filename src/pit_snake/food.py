"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pit_snake.grid import Pit
    from pit_snake.snake import Snake

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100


class FoodPlacer:
    """Places the single food item by bounded rejection sampling.

    Samples are drawn uniformly over the pit interior and redrawn while they
    land on the snake. After ``max_attempts`` draws the last sample is kept
    even if it is occupied.
    """

    def __init__(
        self,
        pit: Pit,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.pit = pit
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    def place(self, snake: Snake) -> tuple[int, int]:
        """Choose a new food position and return it."""
        attempts = 0
        while True:
            pos = self.pit.random_cell(self.rng)
            attempts += 1
            if not snake.occupies(*pos):
                break
            if attempts >= self.max_attempts:
                logger.warning(
                    "Food placed on the snake at %s after %d attempts.",
                    pos, attempts,
                )
                break
        self.position = pos
        return pos

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position else None,
            "max_attempts": self.max_attempts,
        }
