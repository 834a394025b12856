"""Curses terminal: render surface and keyboard input."""

from __future__ import annotations

import curses
import enum
import logging

from pit_snake.errors import TerminalTooSmallError
from pit_snake.render import Glyph
from pit_snake.snake import Direction

logger = logging.getLogger(__name__)

# Rows/cols kept free around the pit window for the status line.
_PADDING = 4

_PAIR_HEAD = 1
_PAIR_BODY = 2
_PAIR_FOOD = 3
_PAIR_BORDER = 4
_PAIR_TEXT = 5


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    START = "start"
    OTHER = "other"

    @property
    def direction(self) -> Direction | None:
        return _KEY_DIRECTIONS.get(self)


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

_KEY_CODES: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
    ord(" "): Key.START,
}


def translate_key(code: int) -> Key | None:
    """Map a raw curses key code to a :class:`Key`; -1 means no key."""
    if code == -1:
        return None
    return _KEY_CODES.get(code, Key.OTHER)


def required_size(pit_height: int, pit_width: int) -> tuple[int, int]:
    """Return the minimum (rows, cols) of screen needed for the pit."""
    return pit_height + _PADDING, pit_width + _PADDING


class CursesTerminal:
    """Curses-backed render surface and input source.

    The pit is drawn in a bordered window centred on the screen; text goes
    straight onto the main screen.
    """

    def __init__(self, stdscr, pit_height: int, pit_width: int) -> None:
        rows, cols = stdscr.getmaxyx()
        need_rows, need_cols = required_size(pit_height, pit_width)
        if rows < need_rows or cols < need_cols:
            logger.info(
                "Screen is %dx%d, need at least %dx%d.",
                rows, cols, need_rows, need_cols,
            )
            raise TerminalTooSmallError(pit_height + 2, pit_width + 2)

        self.stdscr = stdscr
        self.pit_height = pit_height
        self.pit_width = pit_width
        self._rows = rows
        self._cols = cols

        curses.noecho()
        curses.cbreak()
        stdscr.keypad(True)
        curses.curs_set(0)
        stdscr.timeout(0)
        self.colors = curses.has_colors()
        if self.colors:
            curses.start_color()
            curses.init_pair(_PAIR_HEAD, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(_PAIR_BODY, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(_PAIR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(_PAIR_BORDER, curses.COLOR_CYAN, curses.COLOR_BLACK)
            curses.init_pair(_PAIR_TEXT, curses.COLOR_YELLOW, curses.COLOR_BLACK)

        win_h, win_w = pit_height + 2, pit_width + 2
        self._origin = ((rows - win_h) // 2, (cols - win_w) // 2)
        self.window = curses.newwin(win_h, win_w, *self._origin)
        self.window.keypad(True)
        self._glyphs = self._build_glyphs()
        logger.debug("Pit window %dx%d at %s.", win_h, win_w, self._origin)

    def _build_glyphs(self) -> dict[Glyph, tuple[int, int]]:
        def attr(pair: int, bold: bool = False) -> int:
            value = curses.color_pair(pair) if self.colors else 0
            return value | curses.A_BOLD if bold else value

        return {
            Glyph.HEAD_UP: (ord("^"), attr(_PAIR_HEAD, bold=True)),
            Glyph.HEAD_DOWN: (ord("v"), attr(_PAIR_HEAD, bold=True)),
            Glyph.HEAD_LEFT: (ord("<"), attr(_PAIR_HEAD, bold=True)),
            Glyph.HEAD_RIGHT: (ord(">"), attr(_PAIR_HEAD, bold=True)),
            Glyph.BODY: (curses.ACS_BLOCK, attr(_PAIR_BODY)),
            Glyph.FOOD: (curses.ACS_DIAMOND, attr(_PAIR_FOOD, bold=True)),
        }

    @property
    def screen_size(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def pit_origin(self) -> tuple[int, int]:
        return self._origin

    # -- Surface --------------------------------------------------------

    def clear(self) -> None:
        self.stdscr.erase()
        self.window.erase()

    def draw_cell(self, row: int, col: int, glyph: Glyph) -> None:
        if glyph is Glyph.BORDER:
            # The window border is drawn in one go by present().
            return
        char, attr = self._glyphs[glyph]
        self.window.addch(row, col, char, attr)

    def draw_text(self, row: int, col: int, text: str) -> None:
        attr = curses.color_pair(_PAIR_TEXT) | curses.A_BOLD if self.colors else 0
        try:
            self.stdscr.addstr(row, col, text[: max(0, self._cols - col)], attr)
        except curses.error:
            # Writing into the bottom-right cell moves the cursor off screen.
            logger.debug("Text clipped at (%d, %d): %r", row, col, text)

    def present(self) -> None:
        border = curses.color_pair(_PAIR_BORDER) if self.colors else 0
        self.window.attron(border)
        self.window.border()
        self.window.attroff(border)
        self.stdscr.noutrefresh()
        self.window.noutrefresh()
        curses.doupdate()

    # -- Input ----------------------------------------------------------

    def poll_key(self) -> Key | None:
        """Return the next pending key, or None without blocking."""
        self.stdscr.timeout(0)
        return translate_key(self.stdscr.getch())

    def wait_key(self) -> Key:
        """Block until a key is pressed."""
        self.stdscr.timeout(-1)
        try:
            key = None
            while key is None:
                key = translate_key(self.stdscr.getch())
            return key
        finally:
            self.stdscr.timeout(0)
