"""Fixed-timestep pacing for the game loop."""

from __future__ import annotations

import time
from collections.abc import Callable


class MoveGate:
    """Frame counter that lets the snake move once every *move_interval* frames.

    Input is polled every frame, so keeping this separate from the frame
    rate keeps steering responsive at slow snake speeds.
    """

    def __init__(self, move_interval: int = 2) -> None:
        if move_interval < 1:
            raise ValueError("move_interval must be at least 1.")
        self.move_interval = move_interval
        self.frame_count = 0

    def tick(self) -> bool:
        """Count one frame; return True when the snake should move."""
        self.frame_count += 1
        if self.frame_count >= self.move_interval:
            self.frame_count = 0
            return True
        return False


class FrameClock:
    """Caps the frame rate by sleeping a fixed delay after each frame."""

    def __init__(
        self,
        frame_delay: float = 0.05,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if frame_delay < 0:
            raise ValueError("frame_delay must be >= 0.")
        self.frame_delay = frame_delay
        self._sleep = sleep
        self.frames = 0

    def wait(self) -> None:
        self.frames += 1
        if self.frame_delay:
            self._sleep(self.frame_delay)
