"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from pit_snake.errors import PitTooSmallError
from pit_snake.grid import MIN_PIT_SIZE

logger = logging.getLogger(__name__)


def _require_number(name: str, value, kinds) -> None:
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise ValueError(f"{name} must be a number, got {value!r}.")


@dataclass(frozen=True)
class GameConfig:
    """Pit size, pacing and seeding for a single run.

    Supports JSON serialization so a run can be repeated.
    """

    # Pit
    pit_height: int = 20
    pit_width: int = 40

    # Pacing
    move_interval: int = 2
    frame_delay: float = 0.05

    # Food
    max_food_attempts: int = 100
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("pit_height", "pit_width", "move_interval", "max_food_attempts"):
            _require_number(name, getattr(self, name), int)
        _require_number("frame_delay", self.frame_delay, (int, float))
        if self.seed is not None:
            _require_number("seed", self.seed, int)

        if self.pit_height < MIN_PIT_SIZE or self.pit_width < MIN_PIT_SIZE:
            raise PitTooSmallError(
                f"pit_height and pit_width must each be at least {MIN_PIT_SIZE}."
            )
        if self.move_interval < 1:
            raise ValueError("move_interval must be at least 1.")
        if self.frame_delay < 0:
            raise ValueError("frame_delay must be >= 0.")
        if self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied, skipping ``None`` values."""
        d = self.to_dict()
        d.update({k: v for k, v in overrides.items() if v is not None})
        return GameConfig(**d)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file, ignoring unknown keys."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object.")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in raw.items() if k in known})
