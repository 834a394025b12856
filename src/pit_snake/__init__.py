"""Pit Snake: a terminal snake game."""

from pit_snake.config import GameConfig
from pit_snake.engine import Frame, GameEngine, RunState, StepOutcome
from pit_snake.errors import PitTooSmallError, SnakeError, TerminalTooSmallError
from pit_snake.grid import CellType, Pit
from pit_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "Frame",
    "GameConfig",
    "GameEngine",
    "Pit",
    "PitTooSmallError",
    "RunState",
    "Snake",
    "SnakeError",
    "StepOutcome",
    "TerminalTooSmallError",
]
