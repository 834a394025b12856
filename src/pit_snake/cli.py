"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import sys

from pit_snake.config import GameConfig
from pit_snake.errors import SnakeError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pit-snake",
        description="Steer a snake around the pit with the arrow keys.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags override its values.",
    )
    parser.add_argument("--pit-height", type=int, default=None)
    parser.add_argument("--pit-width", type=int, default=None)
    parser.add_argument(
        "--move-interval", type=int, default=None,
        help="Frames between snake moves.",
    )
    parser.add_argument(
        "--frame-delay", type=float, default=None,
        help="Seconds to sleep after each frame.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; otherwise only errors reach stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    fmt = "%(asctime)s %(name)s %(levelname)s %(message)s"
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file, level=args.log_level, format=fmt,
        )
    else:
        # Curses owns the screen, so keep stderr quiet while it runs.
        logging.basicConfig(level=logging.ERROR, format=fmt)


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.replace(
        pit_height=args.pit_height,
        pit_width=args.pit_width,
        move_interval=args.move_interval,
        frame_delay=args.frame_delay,
        seed=args.seed,
    )


def _play(stdscr, config: GameConfig) -> None:
    from pit_snake.app import GameLoop
    from pit_snake.engine import GameEngine
    from pit_snake.scheduler import FrameClock, MoveGate
    from pit_snake.terminal import CursesTerminal

    terminal = CursesTerminal(stdscr, config.pit_height, config.pit_width)
    engine = GameEngine.from_config(config)
    loop = GameLoop(
        engine,
        terminal,
        gate=MoveGate(config.move_interval),
        clock=FrameClock(config.frame_delay),
    )
    loop.run()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``pit-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = _load_config(args)
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    logger.info("Starting game with %s", config.to_dict())
    try:
        curses.wrapper(_play, config)
    except SnakeError as exc:
        print(exc, file=sys.stderr)  # noqa: T201
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
