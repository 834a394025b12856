"""Cooperative game loop tying the engine to a terminal."""

from __future__ import annotations

import logging
from typing import Protocol

from pit_snake.engine import GameEngine, RunState
from pit_snake.render import (
    Surface,
    render_end_screen,
    render_frame,
    render_start_screen,
)
from pit_snake.scheduler import FrameClock, MoveGate
from pit_snake.terminal import Key

logger = logging.getLogger(__name__)


class Terminal(Surface, Protocol):
    """A render surface that also provides keyboard input."""

    def poll_key(self) -> Key | None: ...

    def wait_key(self) -> Key: ...


class GameLoop:
    """Runs one game from the start screen to the end screen.

    Each frame polls at most one key, lets the :class:`MoveGate` decide
    whether the snake moves, renders, and waits on the :class:`FrameClock`.
    """

    def __init__(
        self,
        engine: GameEngine,
        terminal: Terminal,
        gate: MoveGate | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        self.engine = engine
        self.terminal = terminal
        self.gate = gate if gate is not None else MoveGate()
        self.clock = clock if clock is not None else FrameClock()

    def run(self) -> RunState | None:
        """Play until the run ends or the player quits.

        Returns the final run state, or ``None`` if the player quit.
        """
        if not self._start_screen():
            logger.info("Player quit from the start screen.")
            return None

        state = self.play()
        if state is None:
            logger.info("Player quit at tick %d.", self.engine.tick)
            return None

        logger.info(
            "Run ended: %s with length %d/%d.",
            state.value, self.engine.length, self.engine.max_length,
        )
        render_end_screen(self.terminal, self.engine.snapshot())
        while self.terminal.wait_key() is not Key.QUIT:
            pass
        return state

    def play(self) -> RunState | None:
        """Run frames until the state is terminal; ``None`` on quit."""
        state = self.engine.check_terminal()
        while not state.is_terminal:
            if not self.frame():
                return None
            state = self.engine.check_terminal()
        return state

    def frame(self) -> bool:
        """Process a single frame. Returns False if the player quit."""
        key = self.terminal.poll_key()
        if key is Key.QUIT:
            return False
        if key is not None and key.direction is not None:
            self.engine.set_direction(key.direction)

        if self.gate.tick():
            outcome = self.engine.advance()
            logger.debug("Tick %d: %s", self.engine.tick, outcome.value)
            if self.engine.check_terminal().is_terminal:
                return True

        render_frame(self.terminal, self.engine.snapshot())
        self.clock.wait()
        return True

    def _start_screen(self) -> bool:
        render_start_screen(self.terminal, self.engine.max_length)
        while True:
            key = self.terminal.wait_key()
            if key is Key.START:
                return True
            if key is Key.QUIT:
                return False
