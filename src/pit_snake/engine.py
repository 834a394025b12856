"""Step-based game engine composing pit, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pit_snake.food import DEFAULT_MAX_ATTEMPTS, FoodPlacer
from pit_snake.grid import CellType, Pit
from pit_snake.snake import Direction, Snake

if TYPE_CHECKING:
    from pit_snake.config import GameConfig

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 3


class StepOutcome(enum.Enum):
    """Result of a single :meth:`GameEngine.advance` call."""

    MOVED = "moved"
    ATE = "ate"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"

    @property
    def is_collision(self) -> bool:
        return self in (StepOutcome.WALL_COLLISION, StepOutcome.SELF_COLLISION)


class RunState(enum.Enum):
    """Overall state of a run. GAME_OVER and VICTORY are final."""

    PLAYING = "playing"
    GAME_OVER = "game_over"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        return self is not RunState.PLAYING


@dataclass(frozen=True)
class Frame:
    """Read-only snapshot of the game handed to the renderer."""

    cells: np.ndarray
    direction: Direction
    length: int
    max_length: int
    run_state: RunState


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the pit, the snake and the food placer. Direction
    changes are buffered with :meth:`set_direction` and applied by the next
    :meth:`advance`, which moves the snake by one cell.
    """

    def __init__(
        self,
        pit_height: int = 20,
        pit_width: int = 40,
        max_food_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
    ) -> None:
        self.pit = Pit(height=pit_height, width=pit_width)
        self.rng = np.random.default_rng(seed)

        start_row, start_col = self.pit.center
        self.snake = Snake(
            start_row,
            start_col,
            max_length=self.pit.half_perimeter,
            direction=Direction.RIGHT,
            length=INITIAL_LENGTH,
        )

        self.food = FoodPlacer(
            self.pit, max_attempts=max_food_attempts, rng=self.rng,
        )
        self.food.place(self.snake)

        self.tick = 0
        self.last_outcome: StepOutcome | None = None
        self._pending_direction: Direction | None = None

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        return cls(
            pit_height=config.pit_height,
            pit_width=config.pit_width,
            max_food_attempts=config.max_food_attempts,
            seed=config.seed,
        )

    @property
    def length(self) -> int:
        return self.snake.length

    @property
    def max_length(self) -> int:
        return self.snake.max_length

    @property
    def food_position(self) -> tuple[int, int]:
        assert self.food.position is not None  # noqa: S101
        return self.food.position

    @property
    def pending_direction(self) -> Direction | None:
        return self._pending_direction

    def set_direction(self, direction: Direction) -> None:
        """Buffer a direction change for the next step.

        A request for the reverse of the current heading is ignored, as is
        any request once the run has ended. Later requests in the same tick
        replace earlier ones.
        """
        if self.check_terminal().is_terminal:
            return
        if self.snake.is_reversal(direction):
            return
        self._pending_direction = direction

    def advance(self) -> StepOutcome:
        """Move the snake one cell and report what happened.

        Once the run has ended the snake stays put and the last outcome is
        returned again.
        """
        if self.last_outcome is not None and self.check_terminal().is_terminal:
            return self.last_outcome

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        tail = self.snake.advance()
        self.tick += 1
        head_r, head_c = self.snake.head

        if not self.pit.in_bounds(head_r, head_c):
            outcome = StepOutcome.WALL_COLLISION
        elif self.snake.self_collision():
            outcome = StepOutcome.SELF_COLLISION
        elif self.snake.head == self.food.position:
            self.snake.grow(tail)
            if self.snake.self_collision():
                # Food left on the old tail by a degraded placement.
                outcome = StepOutcome.SELF_COLLISION
            else:
                if self.snake.length < self.snake.max_length:
                    self.food.place(self.snake)
                outcome = StepOutcome.ATE
        else:
            outcome = StepOutcome.MOVED

        self.last_outcome = outcome
        if outcome.is_collision:
            self.snake.alive = False
            logger.info(
                "Snake died (%s) at tick %d with length %d.",
                outcome.value, self.tick, self.snake.length,
            )
        elif self.snake.length >= self.snake.max_length:
            logger.info(
                "Snake reached its maximum length %d at tick %d.",
                self.snake.max_length, self.tick,
            )
        return outcome

    def check_terminal(self) -> RunState:
        """Classify the run as playing, lost or won."""
        if self.last_outcome is not None and self.last_outcome.is_collision:
            return RunState.GAME_OVER
        if self.snake.length >= self.snake.max_length:
            return RunState.VICTORY
        return RunState.PLAYING

    def snapshot(self) -> Frame:
        """Paint the pit and return a frame for rendering."""
        self.pit.clear()
        if self.food.position is not None:
            self.pit.set(*self.food.position, CellType.FOOD)
        for r, c in list(self.snake.body)[1:]:
            if self.pit.in_bounds(r, c):
                self.pit.set(r, c, CellType.BODY)
        head_r, head_c = self.snake.head
        if self.pit.in_bounds(head_r, head_c):
            self.pit.set(head_r, head_c, CellType.HEAD)
        return Frame(
            cells=self.pit.cells.copy(),
            direction=self.snake.direction,
            length=self.snake.length,
            max_length=self.snake.max_length,
            run_state=self.check_terminal(),
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "run_state": self.check_terminal().value,
            "last_outcome": (
                self.last_outcome.value if self.last_outcome else None
            ),
            "pit": self.pit.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
